"""Errors raised by the account service.

Every error carries a human-readable message that is returned verbatim
to the client by ``users.middleware.AccountErrorMiddleware``.
"""


class AccountError(Exception):
    """Base class for client-visible account errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmailAlreadyExists(AccountError):
    pass


class UserNotFound(AccountError):
    pass


class InvalidToken(UserNotFound):
    """No user holds the given password reset token."""


class NeedNotFound(AccountError):
    pass


class IncorrectOldPassword(AccountError):
    pass


class InvalidCredentials(AccountError):
    pass


class StaleUserRecord(AccountError):
    """The user row changed since it was loaded."""


class ConflictingUserRecord(AccountError):
    """A unique field other than the email collided with another user."""
