# account_service/infra/sqlalchemy/refresh_token_store.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from account_service.models.base import as_utc
from account_service.models.refresh_token import RefreshTokenModel
from account_service.services._shared.entities import RefreshToken
from account_service.services._shared.ports import RefreshTokenStore
from account_service.uow import SQLAlchemyUnitOfWork


def to_refresh_token(row: RefreshTokenModel) -> RefreshToken:
    return RefreshToken(
        id=row.id,
        token=row.token,
        user_id=row.user_id,
        expires_in=as_utc(row.expires_in),
    )


@dataclass(slots=True)
class SQLAlchemyRefreshTokenStore(RefreshTokenStore):
    """
    Refresh token store backed by :class:`RefreshTokenRepository`.

    ``delete_by_id`` is a single conditional ``DELETE``; its row count tells
    a concurrent loser that the record is already gone.

    :param uow_factory: Builds the unit of work for one call.
    """

    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = SQLAlchemyUnitOfWork

    def find_by_token(self, token: str) -> RefreshToken | None:
        with self.uow_factory() as uow:
            row = uow.refresh_tokens.get_by_token(token)
            return to_refresh_token(row) if row else None

    def create(self, *, token: str, user_id: str, expires_in: datetime) -> RefreshToken:
        with self.uow_factory() as uow:
            row = uow.refresh_tokens.add(
                RefreshTokenModel(token=token, user_id=user_id, expires_in=expires_in)
            )
            return to_refresh_token(row)

    def delete_by_id(self, token_id: str) -> bool:
        with self.uow_factory() as uow:
            return uow.refresh_tokens.delete_by_pk(token_id)

    def delete_expired(self, now: datetime) -> int:
        with self.uow_factory() as uow:
            return uow.refresh_tokens.delete_expired(now)
