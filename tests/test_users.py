"""Tests for the credential store."""

import pytest
from flask import Flask
from flask_bcrypt import Bcrypt

from cms.errors import AlreadyTaken, InvalidInput
from cms.users import CredentialStore


@pytest.fixture
def bcrypt():
    app = Flask(__name__)
    app.config["BCRYPT_LOG_ROUNDS"] = 4
    return Bcrypt(app)


@pytest.fixture
def store(tmp_path, bcrypt):
    return CredentialStore(str(tmp_path / "users.yml"), bcrypt)


def test_register_then_authenticate(store):
    store.register("ben", "harvey")
    assert store.authenticate("ben", "harvey") is True
    assert store.authenticate("ben", "wrong") is False


def test_unknown_user(store):
    assert store.authenticate("nobody", "harvey") is False


def test_password_is_hashed_on_disk(tmp_path, store):
    store.register("ben", "harvey")
    assert "harvey" not in (tmp_path / "users.yml").read_text()


def test_register_duplicate(store):
    store.register("ben", "harvey")
    with pytest.raises(AlreadyTaken) as exc_info:
        store.register("ben", "other")
    assert exc_info.value.message == "Sorry, that username is taken"
    assert store.authenticate("ben", "harvey") is True
    assert store.usernames() == ["ben"]


@pytest.mark.parametrize("username", ["", "   "])
def test_register_blank_username(store, username):
    with pytest.raises(InvalidInput) as exc_info:
        store.register(username, "secret")
    assert exc_info.value.message == "Invalid username"
    assert store.usernames() == []


def test_users_survive_restart(tmp_path, bcrypt, store):
    store.register("ben", "harvey")
    reloaded = CredentialStore(str(tmp_path / "users.yml"), bcrypt)
    assert reloaded.exists("ben")
    assert reloaded.authenticate("ben", "harvey") is True


def test_two_stores_on_one_file_keep_every_user(tmp_path, bcrypt):
    path = str(tmp_path / "users.yml")
    server = CredentialStore(path, bcrypt)
    command_line = CredentialStore(path, bcrypt)

    command_line.register("cli", "one")
    assert server.exists("cli")

    server.register("web", "two")
    assert sorted(CredentialStore(path, bcrypt).usernames()) == ["cli", "web"]
    assert server.authenticate("cli", "one") is True


def test_failed_write_leaves_users_untouched(store, monkeypatch):
    store.register("ben", "harvey")

    def permission_denied(*args, **kwargs):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr("cms.yaml_file.yaml.safe_dump", permission_denied)
    with pytest.raises(PermissionError):
        store.register("amy", "pond")

    assert store.usernames() == ["ben"]
    assert store.authenticate("ben", "harvey") is True
