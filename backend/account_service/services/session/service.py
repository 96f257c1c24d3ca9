"""
Session use cases
=================

``SessionStartService``
    Email + password -> access token and the first refresh token.

``SessionRefreshService``
    Refresh token -> new access token and a new refresh token. The presented
    token is consumed: a new record is created, then the old one is deleted.

Refresh token lifecycle::

    Active --refresh--> Rotated (deleted)
    Active --time passes--> Expired (kept until purged, never revived)

A token is valid while ``now <= expires_in``.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from account_service.services._shared.base import BaseService, ServiceContext
from account_service.services._shared.entities import RefreshToken
from account_service.services._shared.errors import (
    AccountNotFoundByEmail,
    RefreshTokenExpired,
    RefreshTokenNotFound,
    WrongPassword,
)
from account_service.services._shared.ports import (
    AccountStore,
    Clock,
    HashProvider,
    RefreshTokenStore,
    TokenEncryptor,
    UniqueTokenGenerator,
)
from account_service.services.credentials.dto import AuthenticateIn
from account_service.services.credentials.service import verify_credentials
from account_service.services.session.dto import AuthenticationOut, RefreshSessionIn


def _require_positive(ttl: timedelta) -> timedelta:
    if ttl <= timedelta(0):
        raise ValueError("refresh_ttl must be positive")
    return ttl


def issue_refresh_token(
    store: RefreshTokenStore,
    generator: UniqueTokenGenerator,
    *,
    user_id: str,
    now: datetime,
    ttl: timedelta,
) -> RefreshToken:
    """Generate a token value and persist it with ``expires_in = now + ttl``."""
    token = generator.generate()
    return store.create(token=token, user_id=user_id, expires_in=now + ttl)


class SessionStartService(BaseService):
    """Log in: verify credentials and open a session."""

    def __init__(
        self,
        *,
        accounts: AccountStore,
        hasher: HashProvider,
        encryptor: TokenEncryptor,
        generator: UniqueTokenGenerator,
        refresh_tokens: RefreshTokenStore,
        clock: Clock,
        refresh_ttl: timedelta,
        ctx: ServiceContext | None = None,
    ) -> None:
        super().__init__(ctx=ctx)
        self.accounts = accounts
        self.hasher = hasher
        self.encryptor = encryptor
        self.generator = generator
        self.refresh_tokens = refresh_tokens
        self.clock = clock
        self.refresh_ttl = _require_positive(refresh_ttl)

    def execute(self, dto: AuthenticateIn) -> AuthenticationOut:
        """
        :raises AccountNotFoundByEmail: Unknown email.
        :raises WrongPassword: Password mismatch; no token is created.
        """
        try:
            account = verify_credentials(
                self.accounts, self.hasher, email=dto.email, password=dto.password
            )
        except (AccountNotFoundByEmail, WrongPassword) as exc:
            self.log.info(
                "session.start_rejected", extra={"event": "session.start_rejected", "reason": exc.code}
            )
            raise

        access_token = self.encryptor.encrypt(account.id)
        record = issue_refresh_token(
            self.refresh_tokens,
            self.generator,
            user_id=account.id,
            now=self.clock.now(),
            ttl=self.refresh_ttl,
        )

        self.log.info(
            "session.started",
            extra={"event": "session.started", "account_id": account.id, "token_id": record.id},
        )
        return AuthenticationOut(access_token=access_token, refresh_token=record.token)


class SessionRefreshService(BaseService):
    """
    Rotate a refresh token.

    The account behind the token is not re-read: the access token is signed
    for the token's ``user_id`` as stored.
    """

    def __init__(
        self,
        *,
        refresh_tokens: RefreshTokenStore,
        clock: Clock,
        encryptor: TokenEncryptor,
        generator: UniqueTokenGenerator,
        refresh_ttl: timedelta,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        :param refresh_tokens: Refresh token persistence port.
        :param clock: Source of "now" for the expiry check and the new expiry.
        :param encryptor: Access token signer.
        :param generator: Source of new refresh token values.
        :param refresh_ttl: Lifetime of each newly issued refresh token.
        :raises ValueError: If ``refresh_ttl`` is not positive.
        """
        super().__init__(ctx=ctx)
        self.refresh_tokens = refresh_tokens
        self.clock = clock
        self.encryptor = encryptor
        self.generator = generator
        self.refresh_ttl = _require_positive(refresh_ttl)

    def execute(self, dto: RefreshSessionIn) -> AuthenticationOut:
        """
        Consume ``dto.refresh_token`` and issue a fresh pair.

        :param dto: Refresh input.
        :returns: New access and refresh tokens.
        :raises RefreshTokenNotFound: Unknown token, or a concurrent refresh
            consumed it first (the token issued here is then deleted).
        :raises RefreshTokenExpired: ``now`` is past the record's
            ``expires_in``; the record is left in place.
        """
        record = self.refresh_tokens.find_by_token(dto.refresh_token)
        if record is None:
            self._rejected(RefreshTokenNotFound.code)
            raise RefreshTokenNotFound()

        now = self.clock.now()
        if record.is_expired(now):
            self._rejected(RefreshTokenExpired.code, record)
            raise RefreshTokenExpired()

        access_token = self.encryptor.encrypt(record.user_id)
        fresh = issue_refresh_token(
            self.refresh_tokens,
            self.generator,
            user_id=record.user_id,
            now=now,
            ttl=self.refresh_ttl,
        )

        # Conditional delete: only one concurrent rotation of ``record`` wins
        if not self.refresh_tokens.delete_by_id(record.id):
            # The winner issued its own pair; ours must not stay usable
            self.refresh_tokens.delete_by_id(fresh.id)
            self._rejected("already_rotated", record)
            raise RefreshTokenNotFound()

        self.log.info(
            "session.refreshed",
            extra={"event": "session.refreshed", "account_id": record.user_id, "token_id": fresh.id},
        )
        return AuthenticationOut(access_token=access_token, refresh_token=fresh.token)

    def _rejected(self, reason: str, record: RefreshToken | None = None) -> None:
        extra = {"event": "session.refresh_rejected", "reason": reason}
        if record is not None:
            extra.update(account_id=record.user_id, token_id=record.id)
        self.log.info("session.refresh_rejected", extra=extra)
