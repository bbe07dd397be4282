from __future__ import annotations

import logging
from typing import List, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from sitecontent.models.content import USER_KEY_PREFIX, User
from sitecontent.store.kv import KeyValueStore

logger = logging.getLogger(__name__)


def user_key(username: str) -> str:
    return f"{USER_KEY_PREFIX}{username}"


class UserRepository:
    """Admin accounts stored as ``user:<username>`` documents."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get(self, username: str) -> Optional[User]:
        return self._store.get(user_key(username))

    def exists(self, username: str) -> bool:
        return self._store.exists(user_key(username))

    def create(self, username: str, password: str) -> User:
        user: User = {
            "username": username,
            "hashedPassword": generate_password_hash(password),
        }
        self._store.set(user_key(username), user)
        return user

    def delete(self, username: str) -> bool:
        return self._store.delete(user_key(username)) > 0

    def list_usernames(self) -> List[str]:
        keys = self._store.scan_keys(f"{USER_KEY_PREFIX}*")
        return [key[len(USER_KEY_PREFIX):] for key in keys]

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self.get(username)
        if not user or not user.get("hashedPassword"):
            return None

        try:
            valid = check_password_hash(user["hashedPassword"], password)
        except ValueError:
            # Hash produced by an unsupported scheme
            logger.warning("Unsupported password hash for user %s", username)
            valid = False

        if not valid:
            return None

        return user
