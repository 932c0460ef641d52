import logging
import threading

from flask_login import UserMixin

from cms.errors import AlreadyTaken, InvalidInput
from cms.yaml_file import dump_mapping, load_mapping

logger = logging.getLogger(__name__)


class User(UserMixin):
    """Signed-in identity; the username doubles as the session id."""

    def __init__(self, username):
        self.id = username
        self.username = username

    def __repr__(self):
        return f"<User {self.username}>"


class CredentialStore:
    """username -> bcrypt hash, kept in a YAML file rewritten on each sign-up.

    The file is re-read on every call so users added elsewhere (the
    `create-user` command, another worker) are never overwritten.
    """

    def __init__(self, path, bcrypt):
        self.path = path
        self.bcrypt = bcrypt
        self._lock = threading.Lock()

    def exists(self, username: str) -> bool:
        with self._lock:
            return username in load_mapping(self.path)

    def usernames(self):
        with self._lock:
            return list(load_mapping(self.path))

    def authenticate(self, username: str, password: str) -> bool:
        with self._lock:
            hashed = load_mapping(self.path).get(username)
        if hashed is None:
            return False
        return self.bcrypt.check_password_hash(hashed, password)

    def register(self, username: str, password: str):
        if not username or not username.strip():
            raise InvalidInput("Invalid username")
        if self.exists(username):
            raise AlreadyTaken("Sorry, that username is taken")

        hashed = self.bcrypt.generate_password_hash(password).decode("utf-8")
        with self._lock:
            users = load_mapping(self.path)
            if username in users:
                raise AlreadyTaken("Sorry, that username is taken")
            users[username] = hashed
            dump_mapping(self.path, users)
        logger.info("Registered user %s", username)
