import os
import tempfile

import yaml


def load_mapping(path):
    """Read a YAML mapping, treating a missing or empty file as ``{}``."""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def dump_mapping(path, data):
    """Replace the file at path with data; the old file survives a failed write."""
    folder = os.path.dirname(os.path.abspath(path))
    os.makedirs(folder, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=folder, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
        os.replace(tmp_path, path)
    except BaseException:
        os.remove(tmp_path)
        raise
