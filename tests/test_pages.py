import pytest

from authportal.pages import (
    Route,
    error_text,
    home_page,
    login_page,
    register_page,
    user_page,
)
from authportal.service import ServerFnError


def test_route_paths():
    assert [route.value for route in Route] == ["/", "/register", "/login", "/user"]
    page = user_page("You are not Authorizied!", False)
    assert f'href="{Route("/login").value}"' in page


def test_error_text_takes_part_after_first_colon():
    err = ServerFnError("Password is not correct!")
    assert error_text(str(err)) == " Password is not correct!"


def test_error_text_stops_at_next_colon():
    assert error_text("a: b: c") == " b"


def test_error_text_without_colon_raises():
    with pytest.raises(ValueError):
        error_text("no detail here")


def test_home_page_shows_home():
    page = home_page()
    assert '<div class="text-sky-500">Home</div>' in page
    assert "/assets/tailwind.css" in page


def test_login_page_without_error_has_no_error_block():
    page = login_page("")
    assert "bg-rose-100" not in page
    assert 'action="/login"' in page
    assert 'href="/register"' in page


def test_login_page_with_error_shows_it():
    page = login_page(" Password is not correct!")
    assert "bg-rose-100" in page
    assert "Password is not correct!" in page


def test_register_page_escapes_error():
    page = register_page("<b>bad</b>")
    assert "&lt;b&gt;bad&lt;/b&gt;" in page
    assert "<b>bad</b>" not in page
    assert 'action="/register"' in page
    assert 'href="/login"' in page


def test_register_page_has_credential_fields():
    page = register_page("")
    assert 'name="username"' in page
    assert 'type="password"' in page
    assert "Already have an account ?" in page


def test_user_page_logged_in_offers_logout():
    page = user_page("Hello alice", True)
    assert "Hello alice" in page
    assert "log out" in page
    assert "login now" not in page


def test_user_page_logged_out_offers_login():
    page = user_page("You are not Authorizied!", False)
    assert "login now" in page
    assert "log out" not in page
    assert 'href="/login"' in page