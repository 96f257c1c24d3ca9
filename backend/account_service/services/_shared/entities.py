"""
Persistence-agnostic records exchanged between use cases and stores.

Stores map their storage representation (ORM rows, Redis hashes, dicts) to
these records so that use cases never see ORM instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Account:
    """
    Registered account.

    :ivar id: Stable identifier assigned by the store at creation.
    :ivar name: Display name.
    :ivar email: Login email (normalized, unique).
    :ivar password_hash: One-way hash of the password; never the plaintext.
    :ivar created_at: Creation timestamp (UTC).
    :ivar updated_at: Last update timestamp (UTC).
    """

    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class RefreshToken:
    """
    Server-side refresh token record.

    :ivar id: Record identifier (used for deletion on rotation).
    :ivar token: Opaque value presented by the client.
    :ivar user_id: Owning account id.
    :ivar expires_in: Absolute instant after which the token is invalid.
    """

    id: str
    token: str
    user_id: str
    expires_in: datetime

    def is_expired(self, now: datetime) -> bool:
        """Return ``True`` when ``now`` is strictly past ``expires_in``."""
        return now > self.expires_in
