import pytest

from authportal.auth_session import (
    AuthConfig,
    AuthSession,
    User,
    auth_session_config,
    load_user,
)
from authportal.db import Database


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "db.sqlite")
    yield database
    database.close()


def test_config_uses_guest_as_anonymous():
    assert auth_session_config().anonymous_user_id == 1


def test_load_guest(db):
    user = load_user(1, db)
    assert user == User(1, True, "guest")
    assert user.is_anonymous()
    assert not user.is_active()
    assert not user.is_authenticated()


def test_load_registered_user(db):
    password = "password"
    user_id = db.add_user("alice", password)
    user = load_user(user_id, db)
    assert user == User(user_id, False, "alice")
    assert user.is_authenticated() and user.is_active()


def test_load_unknown_user(db):
    with pytest.raises(LookupError):
        load_user(999, db)


def test_anonymous_session_is_guest(db):
    auth = AuthSession(db, {}, auth_session_config())
    assert auth.current_user().username == "guest"
    assert not auth.is_authenticated()


def test_login_and_logout(db):
    password = "password"
    user_id = db.add_user("alice", password)
    data = {}
    auth = AuthSession(db, data, auth_session_config())
    auth.login_user(user_id)
    assert auth.is_authenticated()
    assert auth.current_user() == User(user_id, False, "alice")
    assert AuthSession(db, dict(data), auth_session_config()).is_authenticated()
    auth.logout_user()
    assert not auth.is_authenticated()
    assert auth.current_user().id == 1


def test_no_anonymous_user_configured(db):
    auth = AuthSession(db, {}, AuthConfig())
    assert auth.current_user() is None
    assert not auth.is_authenticated()