import bcrypt
import pytest

from authportal.auth_session import AuthSession, auth_session_config
from authportal.db import Database
from authportal.service import ServerFnError, get_user, log_in, log_out, register


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "db.sqlite")
    yield database
    database.close()


@pytest.fixture
def auth(db):
    return AuthSession(db, {}, auth_session_config())


@pytest.mark.parametrize("username,password", [("", "password"), ("   ", "password"), ("alice", "")])
def test_register_rejects_empty(db, username, password):
    with pytest.raises(ServerFnError) as info:
        register(db, username, password)
    assert info.value.message == "Username or Password can't be empty!"


def test_register_stores_hash(db):
    password = "password"
    register(db, "alice", password)
    records = db.find_by_username("alice")
    assert len(records) == 1
    record = records[0]
    assert record.username == "alice"
    assert record.password != password
    assert bcrypt.checkpw(password.encode(), record.password.encode())


def test_register_duplicate(db):
    password = "password"
    register(db, "alice", password)
    with pytest.raises(ServerFnError) as info:
        register(db, "alice", password)
    assert info.value.message == "Username  alice is already taken!"


def test_error_string_has_prefix():
    err = ServerFnError("Password is not correct!")
    assert str(err).split(":")[1].strip() == "Password is not correct!"


def test_log_in_guest_refused(db, auth):
    password = "password"
    with pytest.raises(ServerFnError) as info:
        log_in(db, auth, "guest", password)
    assert info.value.message == "Guest is not allowed to log in."


def test_log_in_unregistered(db, auth):
    password = "password"
    with pytest.raises(ServerFnError) as info:
        log_in(db, auth, "bob", password)
    assert info.value.message == "Username bob is not registered!"


def test_log_in_wrong_password(db, auth):
    password = "password"
    wrong_password = "secret"
    register(db, "alice", password)
    with pytest.raises(ServerFnError) as info:
        log_in(db, auth, "alice", wrong_password)
    assert info.value.message == "Password is not correct!"
    assert not auth.is_authenticated()


def test_log_in_without_session(db):
    password = "password"
    register(db, "alice", password)
    with pytest.raises(ServerFnError) as info:
        log_in(db, None, "alice", password)
    assert info.value.message == "Auth session not Found!"


def test_full_flow(db, auth):
    password = "password"
    register(db, "alice", password)
    with pytest.raises(ServerFnError) as info:
        get_user(auth)
    assert info.value.message == "You are not Authorizied!"

    log_in(db, auth, "alice", password)
    user_id = db.find_by_username("alice")[0].id
    assert get_user(auth) == f"Hello alice, your id is {user_id} !"

    log_out(auth)
    assert not auth.is_authenticated()
    with pytest.raises(ServerFnError):
        get_user(auth)