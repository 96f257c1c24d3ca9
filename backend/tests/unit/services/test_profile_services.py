"""Unit tests for the profile use cases (lookup, rename, email change)."""

from __future__ import annotations

from unittest import mock

import pytest
from account_service.services._shared.entities import Account
from account_service.services._shared.errors import AccountAlreadyExists, AccountNotFoundById
from account_service.services.profile.dto import ChangeEmailIn, GetProfileIn, RenameAccountIn
from account_service.services.profile.service import (
    EmailChangeService,
    ProfileLookupService,
    ProfileRenameService,
)


@pytest.fixture(autouse=True)
def seeded(accounts) -> None:
    accounts.add(Account(id="u1", name="One", email="one@example.com", password_hash="h1"))
    accounts.add(Account(id="u2", name="Two", email="two@example.com", password_hash="h2"))


def test_lookup_returns_account(accounts):
    acc = ProfileLookupService(accounts=accounts).execute(GetProfileIn(user_id="u1"))

    assert (acc.id, acc.name, acc.email) == ("u1", "One", "one@example.com")


def test_lookup_unknown_id(accounts):
    with pytest.raises(AccountNotFoundById):
        ProfileLookupService(accounts=accounts).execute(GetProfileIn(user_id="nope"))


def test_rename_persists_name(accounts):
    out = ProfileRenameService(accounts=accounts).execute(RenameAccountIn(user_id="u1", name="Uno"))

    assert out.name == "Uno"
    assert accounts.find_by_id("u1").name == "Uno"
    assert accounts.find_by_id("u1").password_hash == "h1"


def test_rename_of_vanished_account_raises(accounts):
    with (
        mock.patch.object(accounts, "update", return_value=None),
        pytest.raises(AccountNotFoundById),
    ):
        ProfileRenameService(accounts=accounts).execute(RenameAccountIn(user_id="u1", name="X"))


def test_email_change_normalizes_and_persists(accounts):
    out = EmailChangeService(accounts=accounts).execute(
        ChangeEmailIn(user_id="u1", email="  New@Example.COM ")
    )

    assert out.email == "new@example.com"
    assert accounts.find_by_email("new@example.com").id == "u1"
    assert accounts.find_by_email("one@example.com") is None


def test_email_change_to_taken_address_conflicts(accounts):
    with pytest.raises(AccountAlreadyExists):
        EmailChangeService(accounts=accounts).execute(
            ChangeEmailIn(user_id="u1", email="TWO@example.com")
        )

    assert accounts.find_by_id("u1").email == "one@example.com"


def test_email_change_to_own_address_is_a_no_op_write(accounts):
    with mock.patch.object(accounts, "exists_by_email") as exists_spy:
        out = EmailChangeService(accounts=accounts).execute(
            ChangeEmailIn(user_id="u1", email="One@Example.com")
        )

    exists_spy.assert_not_called()
    assert out.email == "one@example.com"
