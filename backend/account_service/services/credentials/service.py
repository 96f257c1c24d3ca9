# account_service/services/credentials/service.py
from __future__ import annotations

from account_service.services._shared.base import BaseService, ServiceContext
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountNotFoundByEmail, WrongPassword
from account_service.services._shared.ports import AccountStore, HashProvider, TokenEncryptor
from account_service.services.credentials.dto import AccessTokenOut, AuthenticateIn


def verify_credentials(
    accounts: AccountStore,
    hasher: HashProvider,
    *,
    email: str,
    password: str,
) -> Account:
    """
    Look an account up by email and check the password against its hash.

    Shared by every flow that accepts email + password.

    :raises AccountNotFoundByEmail: If no account uses ``email``.
    :raises WrongPassword: If ``password`` does not match the stored hash.
    """
    account = accounts.find_by_email(email)
    if account is None:
        raise AccountNotFoundByEmail(email)
    if not hasher.compare(password, account.password_hash):
        raise WrongPassword()
    return account


class CredentialVerificationService(BaseService):
    """
    Exchange valid credentials for an access token.

    No refresh token is issued and no store is written.
    """

    def __init__(
        self,
        *,
        accounts: AccountStore,
        hasher: HashProvider,
        encryptor: TokenEncryptor,
        ctx: ServiceContext | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.accounts = accounts
        self.hasher = hasher
        self.encryptor = encryptor

    def execute(self, dto: AuthenticateIn) -> AccessTokenOut:
        """
        Verify ``dto`` and sign a token for the account id.

        :param dto: Credentials.
        :returns: The access token.
        :raises AccountNotFoundByEmail: Unknown email.
        :raises WrongPassword: Password mismatch.
        """
        try:
            account = verify_credentials(
                self.accounts, self.hasher, email=dto.email, password=dto.password
            )
        except (AccountNotFoundByEmail, WrongPassword) as exc:
            self.log.info(
                "credentials.rejected", extra={"event": "credentials.rejected", "reason": exc.code}
            )
            raise

        access_token = self.encryptor.encrypt(account.id)
        self.log.info(
            "credentials.verified", extra={"event": "credentials.verified", "account_id": account.id}
        )
        return AccessTokenOut(access_token=access_token)
