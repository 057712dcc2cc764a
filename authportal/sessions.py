"""Server-side session storage with signed session identifiers."""

from __future__ import annotations

import hashlib
import hmac
import json
import secrets
from typing import Any

from .db import Database

DEFAULT_TABLE = "session_table"


class SessionStore:
    """Keeps session data as JSON in a table of the user database."""

    def __init__(self, db: Database, table_name: str = DEFAULT_TABLE, key: bytes | None = None) -> None:
        if not table_name.isidentifier():
            raise ValueError(f"invalid session table name: {table_name!r}")
        self.db = db
        self.table_name = table_name
        self._key = key if key is not None else secrets.token_bytes(64)
        with db.lock, db.connection:
            db.connection.execute(
                f"CREATE TABLE IF NOT EXISTS {table_name} "
                "(id TEXT PRIMARY KEY, data TEXT NOT NULL)"
            )

    def new_session_id(self) -> str:
        return secrets.token_urlsafe(32)

    def _mac(self, session_id: str) -> str:
        return hmac.new(self._key, session_id.encode(), hashlib.sha256).hexdigest()

    def sign(self, session_id: str) -> str:
        """Return a cookie value that carries the id and its signature."""
        return f"{session_id}.{self._mac(session_id)}"

    def unsign(self, token: str) -> str:
        """Return the session id from a signed token; raise ValueError if forged."""
        session_id, sep, mac = token.rpartition(".")
        if not sep or not session_id or not hmac.compare_digest(mac, self._mac(session_id)):
            raise ValueError("invalid session token")
        return session_id

    def load(self, session_id: str) -> dict[str, Any]:
        """Return the stored data of a session, empty if it is unknown."""
        with self.db.lock:
            row = self.db.connection.execute(
                f"SELECT data FROM {self.table_name} WHERE id = ?", (session_id,)
            ).fetchone()
        return json.loads(row[0]) if row is not None else {}

    def save(self, session_id: str, data: dict[str, Any]) -> None:
        with self.db.lock, self.db.connection:
            self.db.connection.execute(
                f"INSERT OR REPLACE INTO {self.table_name} (id, data) VALUES (?, ?)",
                (session_id, json.dumps(data)),
            )

    def delete(self, session_id: str) -> None:
        with self.db.lock, self.db.connection:
            self.db.connection.execute(
                f"DELETE FROM {self.table_name} WHERE id = ?", (session_id,)
            )


def session(db: Database) -> SessionStore:
    """Create the session store with a freshly generated signing key."""
    return SessionStore(db, DEFAULT_TABLE, secrets.token_bytes(64))