"""Exceptions translated into HTTP responses by the application."""


class BadRequestError(Exception):
    """The request cannot be acted upon (unknown target or invalid state)."""


class AuthenticationRequired(Exception):
    """The caller has no session identity, or not the required role."""

    def __init__(self, required_role: str, message: str | None = None):
        self.required_role = required_role
        super().__init__(message or f"{required_role} identity required")


class AccountNotFoundError(Exception):
    """A lifecycle operation targeted an account without domains."""
