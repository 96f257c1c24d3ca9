# account_service/services/session/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RefreshSessionIn:
    """
    Input DTO for a session refresh.

    :param refresh_token: Opaque refresh token value issued earlier.
    :type refresh_token: str
    """

    refresh_token: str


@dataclass(frozen=True, slots=True)
class AuthenticationOut:
    """
    Token pair handed to the client.

    :param access_token: Signed access token for the account.
    :type access_token: str
    :param refresh_token: Single-use opaque refresh token value.
    :type refresh_token: str
    """

    access_token: str
    refresh_token: str
