"""SQLite storage for user accounts."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from os import PathLike
from typing import Union

GUEST_ID = 1
GUEST_NAME = "guest"
DEFAULT_PATH = "db.sqlite"

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS users (
      id INTEGER PRIMARY KEY AUTOINCREMENT,
      username TEXT,
      password TEXT
    )
"""

PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class UserRecord:
    """One row of the ``users`` table."""

    id: int
    username: str
    password: str


class Database:
    """A user table in an SQLite file, seeded with the guest account."""

    def __init__(self, path: PathType = DEFAULT_PATH) -> None:
        self.connection = sqlite3.connect(str(path), check_same_thread=False)
        self.lock = threading.RLock()
        with self.lock, self.connection:
            self.connection.execute(_SCHEMA)
            if self.find_by_id(GUEST_ID) is None:
                self.connection.execute(
                    "INSERT INTO users (username, password) VALUES (?, ?)",
                    (GUEST_NAME, GUEST_NAME),
                )

    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with this id, or None if there is none."""
        with self.lock:
            row = self.connection.execute(
                "SELECT id, username, password FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        return UserRecord(*row) if row is not None else None

    def find_by_username(self, username: str) -> list[UserRecord]:
        """Return every user stored under this name, oldest first."""
        with self.lock:
            rows = self.connection.execute(
                "SELECT id, username, password FROM users WHERE username = ? ORDER BY id",
                (username,),
            ).fetchall()
        return [UserRecord(*row) for row in rows]

    def add_user(self, username: str, password: str) -> int:
        """Insert a user and return the id it was given."""
        with self.lock, self.connection:
            cursor = self.connection.execute(
                "INSERT INTO users (username, password) VALUES (?, ?)",
                (username, password),
            )
        return int(cursor.lastrowid)

    def close(self) -> None:
        with self.lock:
            self.connection.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_database(path: PathType = DEFAULT_PATH) -> Database:
    """Open (creating if needed) the user database at ``path``."""
    return Database(path)