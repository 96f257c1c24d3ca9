"""Session endpoints: login, access-token-only login, and refresh."""

from __future__ import annotations

from flask import Blueprint

from account_service.api.deps import (
    credential_service,
    json_body,
    json_response,
    session_refresh_service,
    session_start_service,
    timing,
)
from account_service.schemas import AccessTokenSchema, LoginSchema, RefreshSchema, TokenPairSchema
from account_service.services.credentials.dto import AuthenticateIn
from account_service.services.session.dto import RefreshSessionIn

bp = Blueprint("sessions", __name__)

login_schema = LoginSchema()
refresh_schema = RefreshSchema()
access_token_schema = AccessTokenSchema()
token_pair_schema = TokenPairSchema()


@bp.post("")
@timing
def start():
    """Verify credentials and return an access + refresh token pair."""

    data = login_schema.load(json_body())
    tokens = session_start_service().execute(AuthenticateIn(**data))
    return json_response({"data": token_pair_schema.dump(tokens)})


@bp.post("/token")
@timing
def access_token():
    """Verify credentials and return an access token only."""

    data = login_schema.load(json_body())
    out = credential_service().execute(AuthenticateIn(**data))
    return json_response({"data": access_token_schema.dump(out)})


@bp.post("/refresh")
@timing
def refresh():
    """Rotate a refresh token. 404 when unknown or already used, 422 when expired."""

    data = refresh_schema.load(json_body())
    tokens = session_refresh_service().execute(RefreshSessionIn(**data))
    return json_response({"data": token_pair_schema.dump(tokens)})
