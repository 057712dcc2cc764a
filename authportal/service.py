"""Account operations: registration, login, logout and greeting."""

from __future__ import annotations

import bcrypt

from .auth_session import AuthSession
from .db import GUEST_NAME, Database

BCRYPT_COST = 10


class ServerFnError(Exception):
    """An error reported to the client by an account operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"error running server function: {self.message}"


def _check_credentials(username: str, password: str) -> None:
    if username.strip() == "" or not password:
        raise ServerFnError("Username or Password can't be empty!")


def _require(auth: AuthSession | None) -> AuthSession:
    if auth is None:
        raise ServerFnError("Auth session not Found!")
    return auth


def register(db: Database, username: str, password: str) -> None:
    """Create an account with a bcrypt-hashed password."""
    _check_credentials(username, password)
    if db.find_by_username(username):
        raise ServerFnError(f"Username  {username} is already taken!")
    hashed = bcrypt.hashpw(password.encode(), bcrypt.gensalt(BCRYPT_COST)).decode()
    db.add_user(username, hashed)


def log_in(db: Database, auth: AuthSession | None, username: str, password: str) -> None:
    """Check the credentials and mark the session as logged in."""
    _check_credentials(username, password)
    if username == GUEST_NAME:
        raise ServerFnError("Guest is not allowed to log in.")
    rows = db.find_by_username(username)
    if not rows:
        raise ServerFnError(f"Username {username} is not registered!")
    record = rows[0]
    if not bcrypt.checkpw(password.encode(), record.password.encode()):
        raise ServerFnError("Password is not correct!")
    _require(auth).login_user(record.id)


def log_out(auth: AuthSession | None) -> None:
    _require(auth).logout_user()


def get_user(auth: AuthSession | None) -> str:
    """Greet the logged-in user, or refuse an anonymous one."""
    session = _require(auth)
    if session.is_authenticated():
        user = session.current_user()
        return f"Hello {user.username}, your id is {user.id} !"
    raise ServerFnError("You are not Authorizied!")