# account_service/services/password/service.py
from __future__ import annotations

from account_service.services._shared.base import BaseService, ServiceContext
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountNotFoundById, WrongPassword
from account_service.services._shared.ports import AccountStore, HashProvider
from account_service.services.password.dto import ChangePasswordIn


class PasswordRotationService(BaseService):
    """
    Replace an account's password after re-verifying the current one.

    Existing refresh tokens are left alone.
    """

    def __init__(
        self,
        *,
        accounts: AccountStore,
        hasher: HashProvider,
        ctx: ServiceContext | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.accounts = accounts
        self.hasher = hasher

    def execute(self, dto: ChangePasswordIn) -> Account | None:
        """
        Verify ``old_password``, hash ``new_password`` and persist it.

        :param dto: Password change input.
        :returns: Whatever the store's ``update`` returns (``None`` if the
            account vanished in between).
        :raises AccountNotFoundById: Unknown ``user_id``.
        :raises WrongPassword: ``old_password`` does not verify; the new
            password is never hashed.
        """
        account = self.accounts.find_by_id(dto.user_id)
        if account is None:
            raise AccountNotFoundById(dto.user_id)

        if not self.hasher.compare(dto.old_password, account.password_hash):
            self.log.info(
                "password.change_rejected",
                extra={
                    "event": "password.change_rejected",
                    "reason": WrongPassword.code,
                    "account_id": account.id,
                },
            )
            raise WrongPassword()

        account.password_hash = self.hasher.hash(dto.new_password)
        updated = self.accounts.update(account)

        self.log.info(
            "password.changed", extra={"event": "password.changed", "account_id": account.id}
        )
        return updated
