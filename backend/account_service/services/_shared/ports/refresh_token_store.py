from __future__ import annotations

import threading
from datetime import datetime
from typing import Protocol
from uuid import uuid4

from account_service.services._shared.entities import RefreshToken


class RefreshTokenStore(Protocol):
    """
    Persistence port for refresh token records.

    Rotation is expressed as ``create`` (new record) followed by
    ``delete_by_id`` (old record). ``delete_by_id`` MUST be conditional on the
    record still existing and report whether it removed anything, so two
    concurrent rotations of the same token cannot both succeed.
    """

    def find_by_token(self, token: str) -> RefreshToken | None:
        """Fetch the record whose opaque value equals ``token``."""
        ...

    def create(self, *, token: str, user_id: str, expires_in: datetime) -> RefreshToken:
        """Persist a new record and return it with its assigned ``id``."""
        ...

    def delete_by_id(self, token_id: str) -> bool:
        """
        Delete a record by id.

        :returns: ``True`` if a record was removed, ``False`` if it was already gone.
        """
        ...

    def delete_expired(self, now: datetime) -> int:
        """
        Remove every record whose ``expires_in`` is strictly before ``now``.

        :returns: Number of records removed.
        """
        ...


class InMemoryRefreshTokenStore(RefreshTokenStore):
    """
    In-memory refresh token store.

    .. note::
       Uses a threading lock so delete-by-id is atomic, as a real store's
       ``DELETE ... WHERE id = ?`` would be.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, RefreshToken] = {}
        self._lock = threading.Lock()

    def find_by_token(self, token: str) -> RefreshToken | None:
        for rec in self._by_id.values():
            if rec.token == token:
                return rec
        return None

    def create(self, *, token: str, user_id: str, expires_in: datetime) -> RefreshToken:
        with self._lock:
            rec = RefreshToken(id=str(uuid4()), token=token, user_id=user_id, expires_in=expires_in)
            self._by_id[rec.id] = rec
            return rec

    def delete_by_id(self, token_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(token_id, None) is not None

    def delete_expired(self, now: datetime) -> int:
        with self._lock:
            stale = [rec.id for rec in self._by_id.values() if rec.expires_in < now]
            for token_id in stale:
                del self._by_id[token_id]
            return len(stale)

    def add(self, record: RefreshToken) -> RefreshToken:
        """Seed a pre-built record (test helper)."""
        with self._lock:
            self._by_id[record.id] = record
            return record

    def all(self) -> list[RefreshToken]:
        """Snapshot of every stored record (test helper)."""
        return list(self._by_id.values())
