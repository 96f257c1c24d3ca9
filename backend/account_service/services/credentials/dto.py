# account_service/services/credentials/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthenticateIn:
    """
    Credentials presented by a client.

    :param email: Login email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AccessTokenOut:
    """
    :param access_token: Signed, time-bound token whose subject is the account id.
    :type access_token: str
    """

    access_token: str
