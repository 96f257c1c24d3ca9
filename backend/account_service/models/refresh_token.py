"""Refresh token persistence model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from account_service.core.extensions import db

from .base import ReprMixin, UUIDPKMixin

if TYPE_CHECKING:
    from .account import AccountModel


class RefreshTokenModel(UUIDPKMixin, ReprMixin, db.Model):
    """
    Outstanding refresh token, consumed once by a session refresh.

    Fields
    ------
    token : str
        Opaque value presented by the client. Unique.
    user_id : str
        Owning account id.
    expires_in : datetime
        Absolute expiry instant (UTC). Valid while ``now <= expires_in``.
    """

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    expires_in: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    account: Mapped[AccountModel] = relationship(back_populates="refresh_tokens")

    __table_args__ = (
        UniqueConstraint("token", name="uq_refresh_tokens_token"),
        Index("ix_refresh_tokens_user_id", "user_id"),
        Index("ix_refresh_tokens_expires_in", "expires_in"),
    )
