"""Authentication state kept inside a user's session."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from .db import GUEST_ID, GUEST_NAME, Database


@dataclass(frozen=True)
class User:
    """A user as seen by the authentication layer."""

    id: int
    anonymous: bool
    username: str

    def is_active(self) -> bool:
        return not self.anonymous

    def is_anonymous(self) -> bool:
        return self.anonymous

    def is_authenticated(self) -> bool:
        return not self.anonymous


@dataclass(frozen=True)
class AuthConfig:
    """Settings for authentication sessions."""

    anonymous_user_id: int | None = None
    session_key: str = "user_auth_session_id"


def auth_session_config() -> AuthConfig:
    """The configuration used by the server: id 1 is the anonymous user."""
    return AuthConfig(anonymous_user_id=GUEST_ID)


def load_user(user_id: int, db: Database) -> User:
    """Load a user; id 1 is the guest. Raise LookupError for unknown ids."""
    if user_id == GUEST_ID:
        return User(id=user_id, anonymous=True, username=GUEST_NAME)
    record = db.find_by_id(user_id)
    if record is None:
        raise LookupError(f"no user with id {user_id}")
    return User(id=user_id, anonymous=False, username=record.username)


class AuthSession:
    """Login state stored in a mutable session mapping."""

    def __init__(self, db: Database, data: MutableMapping[str, Any], config: AuthConfig | None = None) -> None:
        self.db = db
        self.data = data
        self.config = config if config is not None else AuthConfig()

    def current_user(self) -> User | None:
        """The logged-in user, else the anonymous user, else None."""
        user_id = self.data.get(self.config.session_key, self.config.anonymous_user_id)
        if user_id is None:
            return None
        return load_user(user_id, self.db)

    def is_authenticated(self) -> bool:
        user = self.current_user()
        return user is not None and user.is_authenticated()

    def login_user(self, user_id: int) -> None:
        self.data[self.config.session_key] = user_id

    def logout_user(self) -> None:
        self.data.pop(self.config.session_key, None)