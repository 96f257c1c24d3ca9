# account_service/services/profile/service.py
from __future__ import annotations

from account_service.services._shared.base import BaseService, ServiceContext
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountAlreadyExists, AccountNotFoundById
from account_service.services._shared.ports import AccountStore, normalize_email
from account_service.services.profile.dto import ChangeEmailIn, GetProfileIn, RenameAccountIn


class _ProfileService(BaseService):
    def __init__(self, *, accounts: AccountStore, ctx: ServiceContext | None = None) -> None:
        super().__init__(ctx=ctx)
        self.accounts = accounts

    def _load(self, user_id: str) -> Account:
        account = self.accounts.find_by_id(user_id)
        if account is None:
            raise AccountNotFoundById(user_id)
        return account

    def _save(self, account: Account) -> Account:
        updated = self.accounts.update(account)
        if updated is None:
            # Vanished between read and write
            raise AccountNotFoundById(account.id)
        return updated


class ProfileLookupService(_ProfileService):
    """Read one account."""

    def execute(self, dto: GetProfileIn) -> Account:
        """:raises AccountNotFoundById: Unknown ``user_id``."""
        return self._load(dto.user_id)


class ProfileRenameService(_ProfileService):
    """Change an account's display name."""

    def execute(self, dto: RenameAccountIn) -> Account:
        account = self._load(dto.user_id)
        account.name = dto.name
        updated = self._save(account)
        self.log.info(
            "account.renamed", extra={"event": "account.renamed", "account_id": account.id}
        )
        return updated


class EmailChangeService(_ProfileService):
    """
    Change an account's login email.

    Same check-then-write rule as registration: the store's unique constraint
    catches the race and also raises :class:`AccountAlreadyExists`.
    """

    def execute(self, dto: ChangeEmailIn) -> Account:
        """
        :raises AccountNotFoundById: Unknown ``user_id``.
        :raises AccountAlreadyExists: Another account already uses the email.
        """
        account = self._load(dto.user_id)
        email = normalize_email(dto.email)

        if email != account.email and self.accounts.exists_by_email(email):
            self.log.info(
                "account.email_change_rejected",
                extra={
                    "event": "account.email_change_rejected",
                    "reason": AccountAlreadyExists.code,
                    "account_id": account.id,
                },
            )
            raise AccountAlreadyExists(email)

        account.email = email
        updated = self._save(account)
        self.log.info(
            "account.email_changed", extra={"event": "account.email_changed", "account_id": account.id}
        )
        return updated
