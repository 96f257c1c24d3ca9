"""Convenience exports for application schemas."""

from __future__ import annotations

from .account import (
    AccountSchema,
    ChangeEmailSchema,
    ChangePasswordSchema,
    RegisterSchema,
    RenameSchema,
)
from .session import AccessTokenSchema, LoginSchema, RefreshSchema, TokenPairSchema

__all__ = [
    "AccessTokenSchema",
    "AccountSchema",
    "ChangeEmailSchema",
    "ChangePasswordSchema",
    "LoginSchema",
    "RefreshSchema",
    "RegisterSchema",
    "RenameSchema",
    "TokenPairSchema",
]
