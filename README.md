# authportal

A small Flask web application for account registration and login. Users are
stored in a SQLite database, passwords are hashed with bcrypt, and login state
is kept in a server-side session. The session data lives in a table of the
same database, and the browser holds only a signed session id in a cookie.

## Pages

| Path        | Method | What it does                                                 |
|-------------|--------|--------------------------------------------------------------|
| `/`         | GET    | The home page                                                |
| `/register` | GET    | The registration form                                        |
| `/register` | POST   | Creates an account, then redirects to `/login`               |
| `/login`    | GET    | The login form                                               |
| `/login`    | POST   | Signs the account in, then redirects to `/user`              |
| `/user`     | GET    | Greets the signed-in user, or offers a link to log in        |
| `/user`     | POST   | Logs out, then redirects to `/login`                         |

Forms post the fields `username` and `password`. When an operation fails, the
same form is shown again with the error message above it.

Rules:

- Registration and login are refused when the username is blank (only
  whitespace counts as blank) or the password is empty.
- Registration is refused when the username is already taken.
- Login is refused for an unknown username or a wrong password.
- The built-in `guest` account (id 1) is the anonymous user. It is created
  when the database is first opened and cannot log in.

## Installing

```
pip install .
```

## Running

```
authportal
```

This runs the application on Flask's built-in server at `127.0.0.1:8080`. On
first run it creates `db.sqlite` in the current directory, with its `users`
table, the `guest` account and the `session_table` table. Options:

- `--db PATH` — path of the SQLite database (default `db.sqlite`)
- `--host HOST` — address to listen on (default `127.0.0.1`)
- `--port PORT` — port to listen on (default `8080`)

## Using it from Python

`authportal.app.create_app(db_path, secret_key)` returns the Flask
application. With a `secret_key` (a `str` or `bytes`) session cookies stay
valid across restarts. Without one, a fresh signing key is generated each
time.

```python
from authportal.app import create_app

app = create_app("db.sqlite", "secret")
app.run()
```

The account operations live in `authportal.service` and can be called
directly. Each failure raises `ServerFnError`. Its `message` attribute holds
the bare message. `str()` of it adds the prefix
`error running server function: `.

```python
from authportal.db import open_database
from authportal.service import register, ServerFnError

with open_database("db.sqlite") as db:
    password = "password"
    register(db, "alice", password)
    try:
        register(db, "alice", password)
    except ServerFnError as err:
        print(err.message)  # Username  alice is already taken!
```

`log_in(db, auth, username, password)`, `log_out(auth)` and `get_user(auth)`
work on an `authportal.auth_session.AuthSession`. That object wraps a mutable
mapping of session data. `authportal.sessions.SessionStore` loads, saves,
signs and verifies sessions. `authportal.pages` renders the HTML of each page.

## What it does not do

- The pages link the stylesheets `/assets/main.css` and `/assets/tailwind.css`.
  The package neither ships nor serves them, so the pages render unstyled.
- The `authportal` command takes no signing key. Sessions therefore do not
  survive a restart of the command. Use `create_app` with a `secret_key` for
  that.
- It runs only on Flask's development server. It has no production server
  setup.

## Tests

```
pip install .[test]
pytest
```