"""
AccountRegistrationService
==========================

Creates an account after checking the email is free:

1. ``exists_by_email`` (taken -> :class:`AccountAlreadyExists`, nothing else runs).
2. Hash the password.
3. ``create`` with the hash; the store's result is returned as is.

The check-then-create window is closed by the store's unique constraint,
which surfaces as :class:`AccountAlreadyExists` too.
"""

from __future__ import annotations

from account_service.services._shared.base import BaseService, ServiceContext
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountAlreadyExists
from account_service.services._shared.ports import AccountStore, HashProvider
from account_service.services.registration.dto import RegisterAccountIn


class AccountRegistrationService(BaseService):
    """Register a new account."""

    def __init__(
        self,
        *,
        accounts: AccountStore,
        hasher: HashProvider,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        :param accounts: Account persistence port.
        :param hasher: Password hashing port.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.accounts = accounts
        self.hasher = hasher

    def execute(self, dto: RegisterAccountIn) -> Account:
        """
        Create the account.

        :param dto: Registration input.
        :type dto: :class:`RegisterAccountIn`
        :returns: The account exactly as the store returned it.
        :rtype: :class:`Account`
        :raises AccountAlreadyExists: If the email is already registered.
        """
        if self.accounts.exists_by_email(dto.email):
            self.log.info(
                "account.register_rejected",
                extra={"event": "account.register_rejected", "reason": AccountAlreadyExists.code},
            )
            raise AccountAlreadyExists(dto.email)

        password_hash = self.hasher.hash(dto.password)
        account = self.accounts.create(name=dto.name, email=dto.email, password_hash=password_hash)

        self.log.info("account.created", extra={"event": "account.created", "account_id": account.id})
        return account
