"""Endpoints acting on the authenticated account."""

from __future__ import annotations

from flask import Blueprint

from account_service.api.deps import (
    current_account_id,
    email_change_service,
    json_body,
    json_response,
    no_content,
    password_service,
    profile_lookup_service,
    profile_rename_service,
    require_auth,
    timing,
)
from account_service.schemas import (
    AccountSchema,
    ChangeEmailSchema,
    ChangePasswordSchema,
    RenameSchema,
)
from account_service.services.password.dto import ChangePasswordIn
from account_service.services.profile.dto import ChangeEmailIn, GetProfileIn, RenameAccountIn

bp = Blueprint("me", __name__)

account_schema = AccountSchema()
rename_schema = RenameSchema()
change_email_schema = ChangeEmailSchema()
change_password_schema = ChangePasswordSchema()


@bp.get("")
@require_auth
@timing
def profile():
    """Return the authenticated account."""

    account_id = current_account_id()
    account = profile_lookup_service(account_id).execute(GetProfileIn(user_id=account_id))
    return json_response({"data": account_schema.dump(account)})


@bp.patch("/name")
@require_auth
@timing
def rename():
    data = rename_schema.load(json_body())
    account_id = current_account_id()
    profile_rename_service(account_id).execute(RenameAccountIn(user_id=account_id, **data))
    return no_content()


@bp.patch("/email")
@require_auth
@timing
def change_email():
    data = change_email_schema.load(json_body())
    account_id = current_account_id()
    email_change_service(account_id).execute(ChangeEmailIn(user_id=account_id, **data))
    return no_content()


@bp.patch("/password")
@require_auth
@timing
def change_password():
    """Change the password. 401 when ``old_password`` does not verify."""

    data = change_password_schema.load(json_body())
    account_id = current_account_id()
    password_service(account_id).execute(ChangePasswordIn(user_id=account_id, **data))
    return no_content()
