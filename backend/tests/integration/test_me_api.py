"""Integration tests for the authenticated account endpoints."""

from __future__ import annotations

from tests.factories.account import DEFAULT_PASSWORD, AccountFactory
from tests.helpers.assertions import assert_problem
from tests.helpers.auth import expired_token, issue_token
from tests.helpers.http import json_headers

ME = "/api/v1/me"


def test_profile_requires_token(client) -> None:
    resp = client.get(ME)

    assert_problem(resp, 401, "missing_token")


def test_profile_rejects_expired_token(app, client, account) -> None:
    with app.app_context():
        token = expired_token(account.id)

    resp = client.get(ME, headers=json_headers(token))

    assert_problem(resp, 401, "token_expired")


def test_profile_rejects_garbage_token(client) -> None:
    resp = client.get(ME, headers=json_headers("not.a.jwt"))

    assert resp.status_code in {401, 422}
    assert resp.mimetype == "application/problem+json"


def test_profile_returns_account(client, account, auth_header) -> None:
    resp = client.get(ME, headers=auth_header)

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["id"] == account.id
    assert data["email"] == account.email


def test_profile_of_deleted_account_is_not_found(app, client) -> None:
    with app.app_context():
        token = issue_token("no-such-account")

    resp = client.get(ME, headers=json_headers(token))

    assert_problem(resp, 404, "account_not_found_by_id")


def test_rename(client, auth_header) -> None:
    resp = client.patch(f"{ME}/name", json={"name": "Renamed"}, headers=auth_header)
    assert resp.status_code == 204

    assert client.get(ME, headers=auth_header).get_json()["data"]["name"] == "Renamed"


def test_change_email(client, auth_header) -> None:
    resp = client.patch(f"{ME}/email", json={"email": "New@Example.com"}, headers=auth_header)
    assert resp.status_code == 204

    assert client.get(ME, headers=auth_header).get_json()["data"]["email"] == "new@example.com"


def test_change_email_to_taken_address(client, auth_header) -> None:
    other = AccountFactory(email="taken@example.com")

    resp = client.patch(f"{ME}/email", json={"email": other.email}, headers=auth_header)

    assert_problem(resp, 409, "account_already_exists")


def test_change_password_then_login_with_new_one(client, account, auth_header) -> None:
    resp = client.patch(
        f"{ME}/password",
        json={"old_password": DEFAULT_PASSWORD, "new_password": "brand-new-pass"},
        headers=auth_header,
    )
    assert resp.status_code == 204

    old = client.post("/api/v1/sessions", json={"email": account.email, "password": DEFAULT_PASSWORD})
    assert_problem(old, 401, "wrong_password")
    new = client.post("/api/v1/sessions", json={"email": account.email, "password": "brand-new-pass"})
    assert new.status_code == 200


def test_change_password_with_wrong_old_password(client, auth_header) -> None:
    resp = client.patch(
        f"{ME}/password",
        json={"old_password": "nope", "new_password": "brand-new-pass"},
        headers=auth_header,
    )

    assert_problem(resp, 401, "wrong_password")
