# account_service/infra/sqlalchemy/account_store.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from account_service.models.account import AccountModel
from account_service.models.base import as_utc
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountAlreadyExists, violates
from account_service.services._shared.ports import AccountStore, normalize_email
from account_service.uow import SQLAlchemyUnitOfWork

EMAIL_CONSTRAINT = "uq_accounts_email"


def to_account(row: AccountModel) -> Account:
    """Map an ORM row to the persistence-agnostic record."""
    return Account(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at) if row.created_at else None,
        updated_at=as_utc(row.updated_at) if row.updated_at else None,
    )


@dataclass(slots=True)
class SQLAlchemyAccountStore(AccountStore):
    """
    Account store backed by :class:`AccountRepository`.

    Each call runs in its own unit of work: committed when it returns,
    rolled back when it raises.

    :param uow_factory: Builds the unit of work for one call.
    """

    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = SQLAlchemyUnitOfWork

    def exists_by_email(self, email: str) -> bool:
        with self.uow_factory() as uow:
            return uow.accounts.exists_by_email(email)

    def find_by_email(self, email: str) -> Account | None:
        with self.uow_factory() as uow:
            row = uow.accounts.get_by_email(email)
            return to_account(row) if row else None

    def find_by_id(self, account_id: str) -> Account | None:
        with self.uow_factory() as uow:
            row = uow.accounts.get(account_id)
            return to_account(row) if row else None

    def create(self, *, name: str, email: str, password_hash: str) -> Account:
        try:
            with self.uow_factory() as uow:
                row = uow.accounts.add(
                    AccountModel(name=name, email=email, password_hash=password_hash)
                )
                created = to_account(row)
        except IntegrityError as exc:
            # Lost a registration race after the existence check passed
            if violates(exc, EMAIL_CONSTRAINT):
                raise AccountAlreadyExists(normalize_email(email)) from exc
            raise
        return created

    def update(self, account: Account) -> Account | None:
        try:
            with self.uow_factory() as uow:
                row = uow.accounts.get(account.id)
                if row is None:
                    return None
                uow.accounts.update(
                    row,
                    name=account.name,
                    email=account.email,
                    password_hash=account.password_hash,
                )
                updated = to_account(row)
        except IntegrityError as exc:
            if violates(exc, EMAIL_CONSTRAINT):
                raise AccountAlreadyExists(normalize_email(account.email)) from exc
            raise
        return updated
