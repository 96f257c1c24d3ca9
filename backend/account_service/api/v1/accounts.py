"""Account registration endpoint."""

from __future__ import annotations

from flask import Blueprint

from account_service.api.deps import json_body, json_response, registration_service, timing
from account_service.schemas import AccountSchema, RegisterSchema
from account_service.services.registration.dto import RegisterAccountIn

bp = Blueprint("accounts", __name__)

register_schema = RegisterSchema()
account_schema = AccountSchema()


@bp.post("")
@timing
def register():
    """Create an account. 409 when the email is taken."""

    payload = register_schema.load(json_body())
    account = registration_service().execute(RegisterAccountIn(**payload))
    return json_response({"data": account_schema.dump(account)}, status=201)
