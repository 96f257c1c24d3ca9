"""Refresh token repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete

from account_service.models.refresh_token import RefreshTokenModel
from account_service.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshTokenModel]):
    """Persistence-only repository for :class:`RefreshTokenModel`.

    Records are never updated in place: rotation is insert + delete.
    """

    model = RefreshTokenModel

    def _filterable_fields(self):
        return {
            "id": RefreshTokenModel.id,
            "token": RefreshTokenModel.token,
            "user_id": RefreshTokenModel.user_id,
        }

    def get_by_token(self, token: str) -> RefreshTokenModel | None:
        return self.find_one(token=token)

    def delete_expired(self, now: datetime) -> int:
        """Bulk-delete rows whose ``expires_in`` is strictly before ``now``.

        :returns: Number of rows removed.
        """
        result = self.session.execute(
            delete(RefreshTokenModel)
            .where(RefreshTokenModel.expires_in < now)
            .execution_options(synchronize_session="fetch")
        )
        return int(result.rowcount or 0)
