# account_service/services/profile/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GetProfileIn:
    """
    :param user_id: Account to read.
    :type user_id: str
    """

    user_id: str


@dataclass(frozen=True, slots=True)
class RenameAccountIn:
    """
    :param user_id: Account to rename.
    :type user_id: str
    :param name: New display name.
    :type name: str
    """

    user_id: str
    name: str


@dataclass(frozen=True, slots=True)
class ChangeEmailIn:
    """
    :param user_id: Account whose login email changes.
    :type user_id: str
    :param email: New email; compared and stored normalized.
    :type email: str
    """

    user_id: str
    email: str
