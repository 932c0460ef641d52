"""
Document store — named text, markdown and image files kept on disk.
Text documents live flat in the data folder; everything else is treated as
an image and kept in the image folder.
"""

import enum
import logging
import os
import shutil

import markdown
from werkzeug.security import safe_join
from werkzeug.utils import secure_filename

from cms.errors import DocumentNotFound, ValidationError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".txt", ".md")
IMAGE_EXTENSIONS = (".jpg", ".png", ".pdf")
COPY_SUFFIX = "_copy"


class RenderKind(enum.Enum):
    PLAIN_TEXT = "plain_text"
    MARKDOWN = "markdown"
    IMAGE = "image"


def extension(name: str) -> str:
    return os.path.splitext(name)[1]


def render_kind(name: str) -> RenderKind:
    """Pick the display strategy from the file extension.

    Unknown extensions (``.pdf`` included) fall through to IMAGE.
    """
    ext = extension(name)
    if ext == ".txt":
        return RenderKind.PLAIN_TEXT
    if ext == ".md":
        return RenderKind.MARKDOWN
    return RenderKind.IMAGE


def render_markdown(text: str) -> str:
    return markdown.markdown(text, extensions=["fenced_code"])


def copied_name(name: str) -> str:
    base, ext = os.path.splitext(name)
    return f"{base}{COPY_SUFFIX}{ext}"


def validate_name(name: str):
    """Return an error message for an unusable document name, else None."""
    if not name or not name.strip():
        return "A name is required"
    if os.path.basename(name) != name or "\\" in name:
        return "A name may not contain path separators"
    if extension(name) not in TEXT_EXTENSIONS:
        supported = ", ".join(TEXT_EXTENSIONS)
        return f"That extension is not supported. Supported extensions: {supported}"
    return None


class DocumentStore:
    def __init__(self, data_folder, image_folder):
        self.data_folder = data_folder
        self.image_folder = image_folder

    def ensure_folders(self):
        os.makedirs(self.data_folder, exist_ok=True)
        os.makedirs(self.image_folder, exist_ok=True)

    def path_for(self, name: str) -> str:
        folder = self.data_folder if extension(name) in TEXT_EXTENSIONS else self.image_folder
        path = safe_join(folder, name)
        if path is None:
            raise DocumentNotFound(name)
        return path

    @staticmethod
    def _files(folder):
        if not os.path.isdir(folder):
            return []
        return sorted(
            entry for entry in os.listdir(folder)
            if os.path.isfile(os.path.join(folder, entry))
        )

    def text_documents(self):
        return self._files(self.data_folder)

    def images(self):
        return self._files(self.image_folder)

    def list_documents(self):
        return self.text_documents() + self.images()

    def exists(self, name: str) -> bool:
        return name in self.list_documents()

    def _existing_path(self, name):
        if not self.exists(name):
            raise DocumentNotFound(name)
        return self.path_for(name)

    def read(self, name: str) -> bytes:
        with open(self._existing_path(name), "rb") as f:
            return f.read()

    def read_text(self, name: str) -> str:
        return self.read(name).decode("utf-8")

    def write(self, name: str, content):
        if isinstance(content, str):
            content = content.encode("utf-8")
        with open(self.path_for(name), "wb") as f:
            f.write(content)

    def create(self, name: str):
        error = validate_name(name)
        if error:
            raise ValidationError(error)
        self.write(name, b"")
        logger.info("Created document %s", name)

    def upload(self, filename: str, stream) -> str:
        name = secure_filename(filename or "")
        if not name:
            raise ValidationError("No file selected.")
        with open(self.path_for(name), "wb") as f:
            shutil.copyfileobj(stream, f)
        logger.info("Uploaded %s", name)
        return name

    def delete(self, name: str):
        os.remove(self._existing_path(name))
        logger.info("Deleted document %s", name)

    def duplicate(self, name: str) -> str:
        source = self._existing_path(name)
        new_name = copied_name(name)
        shutil.copyfile(source, self.path_for(new_name))
        logger.info("Duplicated %s as %s", name, new_name)
        return new_name

    render_kind = staticmethod(render_kind)
