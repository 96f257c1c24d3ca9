"""Account repository."""

from __future__ import annotations

from sqlalchemy import select

from account_service.models.account import AccountModel
from account_service.repositories.base import BaseRepository
from account_service.services._shared.ports.account_store import normalize_email


class AccountRepository(BaseRepository[AccountModel]):
    """Persistence-only repository for :class:`AccountModel`."""

    model = AccountModel

    def _filterable_fields(self):
        return {"id": AccountModel.id, "email": AccountModel.email}

    def _updatable_fields(self):
        return {"name", "email", "password_hash"}

    def get_by_email(self, email: str) -> AccountModel | None:
        """Fetch an account by email (normalized before lookup)."""
        return self.find_one(email=normalize_email(email))

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when an account with the email exists."""
        stmt = select(AccountModel.id).where(AccountModel.email == normalize_email(email))
        return self.session.execute(stmt.limit(1)).first() is not None
