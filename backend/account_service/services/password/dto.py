# account_service/services/password/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChangePasswordIn:
    """
    Input DTO for a password change.

    :param user_id: Account whose password changes.
    :type user_id: str
    :param old_password: Current password, re-verified before anything is hashed.
    :type old_password: str
    :param new_password: Replacement password (raw).
    :type new_password: str
    """

    user_id: str
    old_password: str
    new_password: str
