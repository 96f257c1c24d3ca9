"""Unit tests for the account and refresh token models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from account_service.models import AccountModel
from account_service.models.base import as_utc
from sqlalchemy.exc import IntegrityError

from tests.factories.account import AccountFactory, RefreshTokenFactory


class TestAccountModel:
    def test_defaults_are_materialized_on_flush(self, session):
        acc = AccountFactory()

        assert len(acc.id) == 36
        assert acc.created_at is not None
        assert acc.updated_at is not None

    def test_email_is_normalized(self, session):
        acc = AccountFactory(email="  MiXeD@Example.COM ")

        assert acc.email == "mixed@example.com"

    @pytest.mark.parametrize("email", ["", "no-at-sign", "user@localhost"])
    def test_malformed_email_is_rejected(self, email):
        with pytest.raises(ValueError):
            AccountModel(name="X", email=email, password_hash="h")

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValueError):
            AccountModel(name="   ", email="a@example.com", password_hash="h")

    def test_email_is_unique(self, session):
        AccountFactory(email="same@example.com")

        with pytest.raises(IntegrityError):
            AccountFactory(email="SAME@example.com")
        session.rollback()


class TestRefreshTokenModel:
    def test_token_value_is_unique(self, session):
        rt = RefreshTokenFactory()

        with pytest.raises(IntegrityError):
            RefreshTokenFactory(token=rt.token)
        session.rollback()

    def test_expiry_round_trips_as_utc(self, session):
        at = datetime(2030, 5, 1, 8, 30, tzinfo=UTC)
        rt = RefreshTokenFactory(expires_in=at)
        session.expire(rt)

        assert as_utc(rt.expires_in) == at


def test_as_utc_treats_naive_values_as_utc():
    naive = datetime(2024, 1, 1, 12, 0)

    assert as_utc(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    aware = datetime(2024, 1, 1, 13, 0, tzinfo=UTC)
    assert as_utc(aware) == aware
