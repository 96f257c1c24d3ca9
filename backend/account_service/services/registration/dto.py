"""
DTOs for AccountRegistrationService.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegisterAccountIn:
    """
    Input payload for account registration.

    :param name: Display name.
    :type name: str
    :param email: Login email; stores normalize it (lowercase + trim).
    :type email: str
    :param password: Raw password. Hashed before it reaches any store.
    :type password: str
    """

    name: str
    email: str
    password: str
