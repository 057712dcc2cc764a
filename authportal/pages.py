"""HTML pages of the account portal."""

from __future__ import annotations

from enum import Enum
from html import escape

_STYLESHEETS = ("/assets/main.css", "/assets/tailwind.css")

_BUTTON_CLASS = (
    "bg-sky-500 text-slate-50 px-3 py-2 rounded-lg w-full my-5 hover:bg-sky-600"
)
_SMALL_BUTTON_CLASS = "px-1 py-2 rounded-lg bg-slate-100 hover:bg-slate-200"


class Route(str, Enum):
    """The pages of the application and their paths."""

    HOME = "/"
    REGISTER = "/register"
    LOGIN = "/login"
    USER = "/user"


def error_text(message: str) -> str:
    """Return the part of an error message after its first colon.

    The text keeps everything up to the next colon, including the leading
    space. A message without a colon has no such part and raises ValueError.
    """
    parts = message.split(":")
    if len(parts) < 2:
        raise ValueError(f"error message has no detail part: {message!r}")
    return parts[1]


def _document(title: str, body: str) -> str:
    links = "\n".join(
        f'<link rel="stylesheet" href="{href}">' for href in _STYLESHEETS
    )
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{escape(title)}</title>\n{links}\n</head>\n"
        f"<body>\n{body}\n</body>\n</html>\n"
    )


def _error_block(error_msg: str) -> str:
    if not error_msg:
        return ""
    return (
        '<div class="bg-rose-100 text-rose-600 py-1 px-2 rounded-lg my-3">'
        f" {escape(error_msg)}</div>"
    )


def _credentials_form(
    *,
    title: str,
    action: Route,
    error_msg: str,
    box_class: str,
    title_class: str,
    username_label_class: str,
    username_input_class: str,
    hidden_label_class: str,
    hidden_input_class: str,
    other_prompt: str,
    other_route: Route,
    other_link: str,
) -> str:
    body = (
        '<div class="screen flex justify-center items-center bg-slate-50">\n'
        f'<div class="{box_class}">\n'
        f'<div class="{title_class}">{escape(title)}</div>\n'
        f"{_error_block(error_msg)}\n"
        f'<form method="post" action="{action.value}">\n'
        '<div class="my-5">\n'
        f'<div class="{username_label_class}">username: </div>\n'
        f'<input class="{username_input_class}" type="text" name="username" value="">\n'
        "</div>\n"
        '<div class="my-5">\n'
        f'<div class="{hidden_label_class}">password: </div>\n'
        f'<input class="{hidden_input_class}" type="password" name="password" value="">\n'
        "</div>\n"
        f'<button class="{_BUTTON_CLASS}" type="submit">{escape(title)}</button>\n'
        "</form>\n"
        f"<div>{escape(other_prompt)}"
        f'<a href="{other_route.value}" class="text-sky-400">{escape(other_link)}</a></div>\n'
        "</div>\n</div>"
    )
    return _document(title, body)


def home_page() -> str:
    return _document("Home", '<div class="text-sky-500">Home</div>')


def register_page(error_msg: str = "") -> str:
    """The registration form, showing ``error_msg`` when it is not empty."""
    return _credentials_form(
        title="Register",
        action=Route.REGISTER,
        error_msg=error_msg,
        box_class="border-solid border-2 border-slate-500 rounded-lg px-3 py-5 w-2/4",
        title_class="text-center text-slate-700 text-3xl",
        username_label_class="text-lg",
        username_input_class="w-full rounded-lg px-2 py-1 text-slate-700",
        hidden_label_class="text-lg text-slate-700",
        hidden_input_class="w-full rounded-lg px-2 py-1",
        other_prompt="Already have an account ?",
        other_route=Route.LOGIN,
        other_link="login now",
    )


def login_page(error_msg: str = "") -> str:
    """The login form, showing ``error_msg`` when it is not empty."""
    return _credentials_form(
        title="Login",
        action=Route.LOGIN,
        error_msg=error_msg,
        box_class="border-solid border-2 border-slate-100 rounded-lg px-3 py-5 w-1/4",
        title_class="text-center text-3xl",
        username_label_class="text-lg text-slate-700",
        username_input_class="w-full rounded-lg px-2 py-1",
        hidden_label_class="text-lg text-slate-700",
        hidden_input_class="w-full rounded-lg px-2 py-1",
        other_prompt="Don't have an account ?",
        other_route=Route.REGISTER,
        other_link="register now",
    )


def user_page(message: str, is_logged_in: bool) -> str:
    """The user page: a greeting with a logout button, or a login link."""
    if is_logged_in:
        action = (
            f'<form method="post" action="{Route.USER.value}">'
            f'<button class="{_SMALL_BUTTON_CLASS}" type="submit">log out</button>'
            "</form>"
        )
    else:
        action = (
            f'<a href="{Route.LOGIN.value}">'
            f'<button class="{_SMALL_BUTTON_CLASS}" type="button">login now</button>'
            "</a>"
        )
    body = (
        '<div class="flex justify-center items-center screen">\n'
        f'<div class="text-5xl">{escape(message)}</div>\n'
        f"{action}\n"
        "</div>"
    )
    return _document("User", body)