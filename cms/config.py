import os
from dotenv import load_dotenv

load_dotenv()

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Config:
    """Application configuration loaded from environment variables."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")

    # Document content — text files live flat in DATA_FOLDER
    DATA_FOLDER = os.environ.get("CMS_DATA_FOLDER", os.path.join(_BASE_DIR, "data"))
    IMAGE_FOLDER = os.environ.get(
        "CMS_IMAGE_FOLDER", os.path.join(_BASE_DIR, "public", "images")
    )

    # YAML-backed stores
    HISTORY_PATH = os.environ.get(
        "CMS_HISTORY_PATH", os.path.join(_BASE_DIR, "history", "history.yml")
    )
    USERS_PATH = os.environ.get(
        "CMS_USERS_PATH", os.path.join(_BASE_DIR, "users", "users.yml")
    )

    # File uploads
    MAX_CONTENT_LENGTH = 20 * 1024 * 1024  # 20 MB

    BCRYPT_LOG_ROUNDS = int(os.environ.get("BCRYPT_LOG_ROUNDS", "12"))

    # Flask-Limiter
    RATELIMIT_ENABLED = os.environ.get("RATELIMIT_ENABLED", "1") != "0"
    RATELIMIT_STORAGE_URI = "memory://"
