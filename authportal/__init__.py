"""A Flask application for user registration, login and sessions over SQLite."""

__version__ = "0.1.0"
__all__ = ["__version__"]