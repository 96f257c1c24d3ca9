"""Unit tests for SessionRefreshService (refresh token rotation)."""

from __future__ import annotations

from datetime import timedelta
from unittest import mock

import pytest
from account_service.services._shared.entities import RefreshToken
from account_service.services._shared.errors import (
    RefreshTokenExpired,
    RefreshTokenNotFound,
    UnprocessableError,
)
from account_service.services.session.dto import AuthenticationOut, RefreshSessionIn
from account_service.services.session.service import SessionRefreshService

TTL = timedelta(seconds=5000)


@pytest.fixture()
def service(refresh_tokens, clock, encryptor, generator) -> SessionRefreshService:
    return SessionRefreshService(
        refresh_tokens=refresh_tokens,
        clock=clock,
        encryptor=encryptor,
        generator=generator,
        refresh_ttl=TTL,
    )


@pytest.fixture()
def t1(refresh_tokens, t0) -> RefreshToken:
    return refresh_tokens.add(
        RefreshToken(id="t1", token="abc", user_id="u1", expires_in=t0 + timedelta(seconds=1000))
    )


def test_refresh_rotates_the_token(service, refresh_tokens, encryptor, t0, t1):
    out = service.execute(RefreshSessionIn(refresh_token="abc"))

    assert isinstance(out, AuthenticationOut)
    assert out.refresh_token != "abc"
    assert encryptor.subject_of(out.access_token) == "u1"

    (fresh,) = refresh_tokens.all()
    assert fresh.id != "t1"
    assert fresh.token == out.refresh_token
    assert fresh.user_id == "u1"
    assert fresh.expires_in == t0 + TTL
    assert refresh_tokens.find_by_token("abc") is None


def test_rotated_token_cannot_be_reused(service, t1):
    first = service.execute(RefreshSessionIn(refresh_token="abc"))

    with pytest.raises(RefreshTokenNotFound):
        service.execute(RefreshSessionIn(refresh_token="abc"))

    # The replacement keeps working
    second = service.execute(RefreshSessionIn(refresh_token=first.refresh_token))
    assert second.refresh_token not in {"abc", first.refresh_token}


def test_unknown_token_raises_not_found(service, refresh_tokens):
    with (
        mock.patch.object(refresh_tokens, "create") as create_spy,
        pytest.raises(RefreshTokenNotFound) as exc_info,
    ):
        service.execute(RefreshSessionIn(refresh_token="nope"))

    create_spy.assert_not_called()
    assert exc_info.value.code == "refresh_token_not_found"


def test_token_is_still_valid_exactly_at_expiry(service, clock, t1):
    clock.set(t1.expires_in)

    out = service.execute(RefreshSessionIn(refresh_token="abc"))

    assert out.refresh_token != "abc"


def test_token_past_expiry_is_rejected_and_kept(service, refresh_tokens, clock, encryptor, t1):
    clock.set(t1.expires_in + timedelta(microseconds=1))

    with (
        mock.patch.object(encryptor, "encrypt") as encrypt_spy,
        pytest.raises(RefreshTokenExpired) as exc_info,
    ):
        service.execute(RefreshSessionIn(refresh_token="abc"))

    encrypt_spy.assert_not_called()
    assert isinstance(exc_info.value, UnprocessableError)
    assert refresh_tokens.all() == [t1]


def test_lost_delete_race_reports_not_found_and_drops_new_token(service, refresh_tokens, t1):
    real_delete = refresh_tokens.delete_by_id

    # Another request consumed "t1" between our find and our delete
    def delete_by_id(token_id):
        return False if token_id == "t1" else real_delete(token_id)

    with (
        mock.patch.object(refresh_tokens, "delete_by_id", side_effect=delete_by_id) as delete_spy,
        pytest.raises(RefreshTokenNotFound),
    ):
        service.execute(RefreshSessionIn(refresh_token="abc"))

    assert delete_spy.call_count == 2
    assert delete_spy.call_args_list[0] == mock.call("t1")
    assert refresh_tokens.all() == [t1]


def test_store_failure_on_delete_propagates(service, refresh_tokens, t1):
    with (
        mock.patch.object(refresh_tokens, "delete_by_id", side_effect=RuntimeError("store down")),
        pytest.raises(RuntimeError, match="store down"),
    ):
        service.execute(RefreshSessionIn(refresh_token="abc"))

    tokens = refresh_tokens.all()
    assert len(tokens) == 2
    assert t1 in tokens
    assert {t.user_id for t in tokens} == {"u1"}


def test_create_happens_before_delete(clock, encryptor, generator, t0):
    store = mock.Mock()
    store.find_by_token.return_value = RefreshToken(
        id="t1", token="abc", user_id="u1", expires_in=t0 + timedelta(seconds=1000)
    )
    store.create.return_value = RefreshToken(
        id="t2", token="rt-1", user_id="u1", expires_in=t0 + TTL
    )
    store.delete_by_id.return_value = True

    SessionRefreshService(
        refresh_tokens=store, clock=clock, encryptor=encryptor, generator=generator, refresh_ttl=TTL
    ).execute(RefreshSessionIn(refresh_token="abc"))

    called = [c[0] for c in store.mock_calls]
    assert called == ["find_by_token", "create", "delete_by_id"]
    store.create.assert_called_once_with(token="rt-1", user_id="u1", expires_in=t0 + TTL)


def test_non_positive_ttl_is_rejected(refresh_tokens, clock, encryptor, generator):
    with pytest.raises(ValueError):
        SessionRefreshService(
            refresh_tokens=refresh_tokens,
            clock=clock,
            encryptor=encryptor,
            generator=generator,
            refresh_ttl=timedelta(0),
        )


def test_rejections_are_logged_with_reason(service, clock, t1, caplog):
    caplog.set_level("INFO", logger="account_service.services.session.service")
    clock.advance(timedelta(days=1))

    with pytest.raises(RefreshTokenExpired):
        service.execute(RefreshSessionIn(refresh_token="abc"))

    (record,) = [
        r for r in caplog.records if getattr(r, "event", None) == "session.refresh_rejected"
    ]
    assert record.reason == "refresh_token_expired"
    assert record.token_id == "t1"
    assert "abc" not in caplog.text
