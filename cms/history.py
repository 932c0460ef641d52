"""
Revision log — every edit appends a full snapshot of the document to a
per-document list, persisted as YAML after each append.

The file is the source of truth: it is re-read under the lock on every
call, so several processes (or the CLI) sharing one file never drop each
other's revisions.
"""

import logging
import threading

from cms.yaml_file import dump_mapping, load_mapping

logger = logging.getLogger(__name__)


class RevisionLog:
    def __init__(self, path):
        self.path = path
        self._lock = threading.Lock()

    def record(self, name: str, content: str):
        with self._lock:
            history = load_mapping(self.path)
            entries = list(history.get(name, [])) + [content]
            history[name] = entries
            dump_mapping(self.path, history)
        logger.info("Recorded revision %d of %s", len(entries), name)

    def history_for(self, name: str):
        with self._lock:
            return list(load_mapping(self.path).get(name, []))

    def documents(self):
        with self._lock:
            return [name for name, entries in load_mapping(self.path).items() if entries]
