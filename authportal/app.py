"""The web application and its command-line entry point."""

from __future__ import annotations

import argparse
from os import PathLike
from typing import Union

from flask import Flask, g, redirect, request

from .auth_session import AuthSession, auth_session_config
from .db import DEFAULT_PATH, open_database
from .pages import (
    Route,
    error_text,
    home_page,
    login_page,
    register_page,
    user_page,
)
from .service import ServerFnError, get_user, log_in, log_out, register
from .sessions import DEFAULT_TABLE, SessionStore, session

SESSION_COOKIE = "session"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

PathType = Union[str, "PathLike[str]"]


def create_app(
    db_path: PathType = DEFAULT_PATH, secret_key: str | bytes | None = None
) -> Flask:
    """Build the application over the database at ``db_path``.

    Without ``secret_key`` a fresh signing key is generated, so sessions do
    not survive a restart.
    """
    db = open_database(db_path)
    if secret_key is None:
        store = session(db)
    else:
        key = secret_key.encode() if isinstance(secret_key, str) else bytes(secret_key)
        store = SessionStore(db, DEFAULT_TABLE, key)
    config = auth_session_config()

    app = Flask(__name__)
    app.extensions["authportal"] = {"db": db, "sessions": store}

    @app.before_request
    def _open_session() -> None:
        session_id = None
        token = request.cookies.get(SESSION_COOKIE)
        if token:
            try:
                session_id = store.unsign(token)
            except ValueError:
                session_id = None
        if session_id is None:
            session_id = store.new_session_id()
        g.session_id = session_id
        g.session_data = store.load(session_id)
        g.auth = AuthSession(db, g.session_data, config)

    @app.after_request
    def _save_session(response):
        if "session_id" in g:
            store.save(g.session_id, g.session_data)
            response.set_cookie(
                SESSION_COOKIE, store.sign(g.session_id), httponly=True, samesite="Lax"
            )
        return response

    def _credentials() -> tuple[str, str]:
        return request.form.get("username", ""), request.form.get("password", "")

    @app.get(Route.HOME.value)
    def home():
        return home_page()

    @app.route(Route.REGISTER.value, methods=["GET", "POST"])
    def register_view():
        if request.method == "GET":
            return register_page("")
        username, password = _credentials()
        try:
            register(db, username, password)
        except ServerFnError as err:
            return register_page(error_text(str(err)))
        return redirect(Route.LOGIN.value)

    @app.route(Route.LOGIN.value, methods=["GET", "POST"])
    def login_view():
        if request.method == "GET":
            return login_page("")
        username, password = _credentials()
        try:
            log_in(db, g.auth, username, password)
        except ServerFnError as err:
            return login_page(error_text(str(err)))
        return redirect(Route.USER.value)

    @app.get(Route.USER.value)
    def user_view():
        try:
            message = get_user(g.auth)
        except ServerFnError as err:
            return user_page(error_text(str(err)), False)
        return user_page(message, True)

    @app.post(Route.USER.value)
    def logout_view():
        try:
            log_out(g.auth)
        except ServerFnError:
            return user_view()
        return redirect(Route.LOGIN.value)

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the server."""
    parser = argparse.ArgumentParser(description="Account registration and login server.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the SQLite database")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    app = create_app(args.db)
    app.run(host=args.host, port=args.port)
    return 0