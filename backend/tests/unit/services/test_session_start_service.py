"""Unit tests for SessionStartService (login)."""

from __future__ import annotations

from datetime import timedelta

import pytest
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountNotFoundByEmail, WrongPassword
from account_service.services.credentials.dto import AuthenticateIn
from account_service.services.session.service import SessionStartService

TTL = timedelta(hours=1)


@pytest.fixture()
def service(accounts, hasher, encryptor, generator, refresh_tokens, clock) -> SessionStartService:
    return SessionStartService(
        accounts=accounts,
        hasher=hasher,
        encryptor=encryptor,
        generator=generator,
        refresh_tokens=refresh_tokens,
        clock=clock,
        refresh_ttl=TTL,
    )


@pytest.fixture(autouse=True)
def account(accounts, hasher) -> Account:
    return accounts.add(
        Account(id="u1", name="U", email="u1@example.com", password_hash=hasher.hash("pw"))
    )


def test_login_issues_access_and_refresh_token(service, refresh_tokens, encryptor, t0):
    out = service.execute(AuthenticateIn(email="u1@example.com", password="pw"))

    assert encryptor.subject_of(out.access_token) == "u1"
    (record,) = refresh_tokens.all()
    assert record.token == out.refresh_token == "rt-1"
    assert record.user_id == "u1"
    assert record.expires_in == t0 + TTL


def test_each_login_gets_its_own_refresh_token(service, refresh_tokens):
    a = service.execute(AuthenticateIn(email="u1@example.com", password="pw"))
    b = service.execute(AuthenticateIn(email="u1@example.com", password="pw"))

    assert a.refresh_token != b.refresh_token
    assert len(refresh_tokens.all()) == 2


@pytest.mark.parametrize(
    ("email", "password", "error"),
    [
        ("u1@example.com", "bad", WrongPassword),
        ("ghost@example.com", "pw", AccountNotFoundByEmail),
    ],
)
def test_failed_login_creates_no_refresh_token(service, refresh_tokens, email, password, error):
    with pytest.raises(error):
        service.execute(AuthenticateIn(email=email, password=password))

    assert refresh_tokens.all() == []
