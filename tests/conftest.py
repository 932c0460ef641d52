"""Shared fixtures: apps wired to throwaway folders under tmp_path."""

import pytest

from book_viewer import create_app as create_book_app
from book_viewer.config import Config as BookConfig
from cms import create_app
from cms.config import Config


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        SECRET_KEY = "test"
        DATA_FOLDER = str(tmp_path / "data")
        IMAGE_FOLDER = str(tmp_path / "images")
        HISTORY_PATH = str(tmp_path / "history.yml")
        USERS_PATH = str(tmp_path / "users.yml")
        BCRYPT_LOG_ROUNDS = 4
        RATELIMIT_ENABLED = False

    app = create_app(TestConfig)
    app.extensions["cms"].credentials.register("admin", "secret")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    client.post("/users/signin", data={"username": "admin", "password": "secret"})
    return client


@pytest.fixture
def stores(app):
    return app.extensions["cms"]


@pytest.fixture
def create_document(stores):
    def _create(name, content=""):
        stores.documents.write(name, content)

    return _create


@pytest.fixture
def flashes(client):
    def _flashes():
        with client.session_transaction() as sess:
            return [message for _, message in sess.get("_flashes", [])]

    return _flashes


@pytest.fixture
def book_dir(tmp_path):
    folder = tmp_path / "book"
    folder.mkdir()
    (folder / "toc.txt").write_text("Ruby Basics\nOther Things\n")
    (folder / "chp1.txt").write_text("Intro line.\n\nRuby is great.\n\nThe end.")
    (folder / "chp2.txt").write_text("Nothing to see here.")
    return folder


@pytest.fixture
def book_client(book_dir):
    class TestBookConfig(BookConfig):
        TESTING = True
        BOOK_DATA_FOLDER = str(book_dir)
        BOOK_TITLE = "Test Book"

    return create_book_app(TestBookConfig).test_client()
