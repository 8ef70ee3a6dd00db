"""A minimal login service."""

from __future__ import annotations


class AuthError(Exception):
    """Raised when logging in fails or a login is required."""


class AuthService:
    """Tracks whether a user has logged in."""

    def __init__(self) -> None:
        self.is_logged_in = False

    def login(self, email: str, password: str) -> None:
        """Log in; both email and password must be given."""
        if not email or not password:
            raise AuthError("missing email or password")
        self.is_logged_in = True

    def check_is_logged_in(self) -> None:
        """Raise AuthError unless a login has succeeded."""
        if not self.is_logged_in:
            raise AuthError("not logged in")