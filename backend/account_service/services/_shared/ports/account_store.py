from __future__ import annotations

import threading
from dataclasses import replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountAlreadyExists


def normalize_email(email: str) -> str:
    """Return the canonical (trimmed, lower-cased) form of an email."""
    return email.strip().lower()


class AccountStore(Protocol):
    """
    Persistence port for :class:`Account` records.

    Implementations own their connections/transactions per call; use cases
    never commit or roll back.
    """

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` if an account is registered under ``email``."""
        ...

    def find_by_email(self, email: str) -> Account | None:
        """Fetch an account by (normalized) email."""
        ...

    def find_by_id(self, account_id: str) -> Account | None:
        """Fetch an account by id."""
        ...

    def create(self, *, name: str, email: str, password_hash: str) -> Account:
        """
        Persist a new account, assigning ``id`` and timestamps.

        :raises AccountAlreadyExists: If the storage-level unique constraint trips.
        """
        ...

    def update(self, account: Account) -> Account | None:
        """Persist the mutable fields of ``account``; ``None`` if it vanished."""
        ...


class InMemoryAccountStore(AccountStore):
    """
    Dict-backed account store used in unit tests.

    .. note::
       Returns copies so callers cannot mutate stored state without ``update``.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Account] = {}
        self._lock = threading.Lock()

    def _now(self) -> datetime:
        return datetime.now(UTC)

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def find_by_email(self, email: str) -> Account | None:
        key = normalize_email(email)
        for acc in self._by_id.values():
            if acc.email == key:
                return replace(acc)
        return None

    def find_by_id(self, account_id: str) -> Account | None:
        acc = self._by_id.get(account_id)
        return replace(acc) if acc else None

    def create(self, *, name: str, email: str, password_hash: str) -> Account:
        with self._lock:
            key = normalize_email(email)
            if any(acc.email == key for acc in self._by_id.values()):
                raise AccountAlreadyExists(key)
            now = self._now()
            acc = Account(
                id=str(uuid4()),
                name=name,
                email=key,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            self._by_id[acc.id] = acc
            return replace(acc)

    def update(self, account: Account) -> Account | None:
        with self._lock:
            current = self._by_id.get(account.id)
            if current is None:
                return None
            stored = replace(
                current,
                name=account.name,
                email=normalize_email(account.email),
                password_hash=account.password_hash,
                updated_at=self._now(),
            )
            self._by_id[account.id] = stored
            return replace(stored)

    def add(self, account: Account) -> Account:
        """Seed a pre-built account (test helper; bypasses uniqueness checks)."""
        self._by_id[account.id] = replace(account)
        return account
