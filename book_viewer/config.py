import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Book viewer configuration loaded from environment variables."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")

    BOOK_DATA_FOLDER = os.environ.get(
        "BOOK_DATA_FOLDER",
        os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "book_data"),
    )
    BOOK_TITLE = os.environ.get("BOOK_TITLE", "The Adventures of Sherlock Holmes")
