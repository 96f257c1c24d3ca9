"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask, HTTP, or SQLAlchemy directly. They serve as stable contracts between
stores, domain records, and application services.

Every error carries a stable machine-readable ``code`` so callers can branch
on ``err.code`` without inspecting the exception type.

The translation to HTTP responses (RFC 7807) is handled by
``account_service/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_accounts_email').

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.
    """
    # PostgreSQL includes the constraint name; SQLite reports "table.column"
    message = str(exc.orig).lower() if exc.orig else ""
    if constraint_name.lower() in message:
        return True
    table_column = constraint_name.lower().removeprefix("uq_").replace("_", ".", 1)
    return table_column in message


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from stores or use cases.
    - The API layer translates them to APIError via BaseService.
    """

    code: ClassVar[str] = "service_error"


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in a store.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    code: ClassVar[str] = "not_found"

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True, eq=False)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    code: ClassVar[str] = "conflict"

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


class AuthenticationError(ServiceError):
    """Raised when presented credentials do not verify."""

    code: ClassVar[str] = "authentication_failed"


class UnprocessableError(ServiceError):
    """Raised when a well-formed request cannot be honoured in the current state."""

    code: ClassVar[str] = "unprocessable"


# --------------------------------------------------------------------------- #
# Account errors
# --------------------------------------------------------------------------- #


class AccountAlreadyExists(ConflictError):
    """Registration or email change with an email that is already taken."""

    code: ClassVar[str] = "account_already_exists"

    def __init__(self, email: str) -> None:
        super().__init__("Account", "email already in use")
        self.email = email


class AccountNotFoundByEmail(NotFoundError):
    """No account is registered under the given email."""

    code: ClassVar[str] = "account_not_found_by_email"

    def __init__(self, email: str) -> None:
        super().__init__("Account", email)

    def __str__(self) -> str:
        return "Account not found for the provided email"


class AccountNotFoundById(NotFoundError):
    """No account exists with the given id."""

    code: ClassVar[str] = "account_not_found_by_id"

    def __init__(self, account_id: str) -> None:
        super().__init__("Account", account_id)


class WrongPassword(AuthenticationError):
    """The supplied password does not match the stored hash."""

    code: ClassVar[str] = "wrong_password"

    def __init__(self) -> None:
        super().__init__("Wrong password")


# --------------------------------------------------------------------------- #
# Refresh token errors
# --------------------------------------------------------------------------- #


class RefreshTokenNotFound(NotFoundError):
    """The presented refresh token does not match any record."""

    code: ClassVar[str] = "refresh_token_not_found"

    def __init__(self) -> None:
        super().__init__("RefreshToken", "provided token")

    def __str__(self) -> str:
        return "Refresh token not found"


class RefreshTokenExpired(UnprocessableError):
    """The presented refresh token matched a record past its ``expires_in``."""

    code: ClassVar[str] = "refresh_token_expired"

    def __init__(self) -> None:
        super().__init__("Refresh token expired")
