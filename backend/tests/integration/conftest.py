"""Fixtures shared by the HTTP-level tests."""

from __future__ import annotations

import pytest

from tests.factories.account import AccountFactory
from tests.helpers.auth import issue_token
from tests.helpers.http import json_headers


@pytest.fixture()
def account(session):
    """A persisted account whose password is ``DEFAULT_PASSWORD``."""
    return AccountFactory(email="owner@example.com", name="Owner")


@pytest.fixture()
def auth_header(app, account) -> dict[str, str]:
    """Bearer headers for ``account``."""
    with app.app_context():
        token = issue_token(account.id)
    return json_headers(token)
