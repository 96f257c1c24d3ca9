"""Shared API helpers: use-case wiring and cross-cutting decorators.

Use cases never read configuration; the builders below translate
``current_app.config`` into constructor arguments once per request.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar, cast

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from account_service.core.extensions import get_redis
from account_service.core.logger import ensure_request_id
from account_service.infra.jwt.flask_jwt_token_encryptor import JWTTokenEncryptor
from account_service.infra.redis.redis_refresh_token_store import RedisRefreshTokenStore
from account_service.infra.sqlalchemy.account_store import SQLAlchemyAccountStore
from account_service.infra.sqlalchemy.refresh_token_store import SQLAlchemyRefreshTokenStore
from account_service.infra.system.clock import SystemClock
from account_service.infra.system.token_generator import UUIDTokenGenerator
from account_service.infra.werkzeug.werkzeug_hash_provider import WerkzeugHashProvider
from account_service.services._shared.base import ServiceContext
from account_service.services._shared.ports import RefreshTokenStore
from account_service.services.credentials.service import CredentialVerificationService
from account_service.services.password.service import PasswordRotationService
from account_service.services.profile.service import (
    EmailChangeService,
    ProfileLookupService,
    ProfileRenameService,
)
from account_service.services.registration.service import AccountRegistrationService
from account_service.services.session.service import SessionRefreshService, SessionStartService

F = TypeVar("F", bound=Callable[..., Any])


# ---------------------------------------------------------------------------- #
# Adapters
# ---------------------------------------------------------------------------- #


def hash_provider() -> WerkzeugHashProvider:
    cfg = current_app.config
    return WerkzeugHashProvider(
        method=cfg.get("PASSWORD_HASH_METHOD", "pbkdf2:sha256"),
        iterations=cfg.get("PASSWORD_HASH_ITERATIONS"),
    )


def token_encryptor() -> JWTTokenEncryptor:
    seconds = int(current_app.config.get("JWT_ACCESS_TOKEN_EXPIRES", 900))
    return JWTTokenEncryptor(expires_delta=timedelta(seconds=seconds))


def refresh_ttl() -> timedelta:
    return timedelta(seconds=int(current_app.config["REFRESH_TOKEN_TTL"]))


def refresh_token_store() -> RefreshTokenStore:
    """Return the store selected by ``REFRESH_TOKEN_BACKEND``."""
    backend = current_app.config.get("REFRESH_TOKEN_BACKEND", "sql")
    if backend == "redis":
        return RedisRefreshTokenStore(get_redis())
    if backend == "sql":
        return SQLAlchemyRefreshTokenStore()
    raise RuntimeError(f"Unknown REFRESH_TOKEN_BACKEND {backend!r}")


def service_context(actor_id: str | None = None) -> ServiceContext:
    """Build the request-scoped context for one use case."""
    return ServiceContext(actor_id=actor_id, request_id=ensure_request_id())


# ---------------------------------------------------------------------------- #
# Use cases
# ---------------------------------------------------------------------------- #


def registration_service() -> AccountRegistrationService:
    return AccountRegistrationService(
        accounts=SQLAlchemyAccountStore(), hasher=hash_provider(), ctx=service_context()
    )


def credential_service() -> CredentialVerificationService:
    return CredentialVerificationService(
        accounts=SQLAlchemyAccountStore(),
        hasher=hash_provider(),
        encryptor=token_encryptor(),
        ctx=service_context(),
    )


def session_start_service() -> SessionStartService:
    return SessionStartService(
        accounts=SQLAlchemyAccountStore(),
        hasher=hash_provider(),
        encryptor=token_encryptor(),
        generator=UUIDTokenGenerator(),
        refresh_tokens=refresh_token_store(),
        clock=SystemClock(),
        refresh_ttl=refresh_ttl(),
        ctx=service_context(),
    )


def session_refresh_service() -> SessionRefreshService:
    return SessionRefreshService(
        refresh_tokens=refresh_token_store(),
        clock=SystemClock(),
        encryptor=token_encryptor(),
        generator=UUIDTokenGenerator(),
        refresh_ttl=refresh_ttl(),
        ctx=service_context(),
    )


def password_service(actor_id: str) -> PasswordRotationService:
    return PasswordRotationService(
        accounts=SQLAlchemyAccountStore(), hasher=hash_provider(), ctx=service_context(actor_id)
    )


def profile_lookup_service(actor_id: str) -> ProfileLookupService:
    return ProfileLookupService(accounts=SQLAlchemyAccountStore(), ctx=service_context(actor_id))


def profile_rename_service(actor_id: str) -> ProfileRenameService:
    return ProfileRenameService(accounts=SQLAlchemyAccountStore(), ctx=service_context(actor_id))


def email_change_service(actor_id: str) -> EmailChangeService:
    return EmailChangeService(accounts=SQLAlchemyAccountStore(), ctx=service_context(actor_id))


# ---------------------------------------------------------------------------- #
# Request helpers
# ---------------------------------------------------------------------------- #


def current_account_id() -> str:
    """Return the account id carried by the verified access token."""
    return cast(str, get_jwt_identity())


def require_auth(func: F) -> F:
    """Ensure the request carries a valid JWT access token."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        verify_jwt_in_request(optional=False)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_body() -> dict[str, Any]:
    return cast(dict[str, Any], request.get_json(silent=True) or {})


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def no_content() -> Response:
    return Response(status=204)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
