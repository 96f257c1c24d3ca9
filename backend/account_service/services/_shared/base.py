# account_service/services/_shared/base.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from account_service.core import errors as api_errors
from account_service.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ServiceError,
    UnprocessableError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (auth, request ids, etc.).

    :param actor_id: Authenticated account identifier.
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: str | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for the account use cases.

    Responsibilities
    ----------------
    * Hold the request-scoped context and a module logger.
    * Centralize error translation for the API layer.
    * Keep use cases thin: collaborators are injected, no web/ORM leakage.

    Notes
    -----
    - Use cases never open sessions or units of work; stores do.
    - One ``execute`` per use case; use cases never call each other.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (auth, tracing).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()
        self.log = logging.getLogger(type(self).__module__)

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc), code=exc.code)

        if isinstance(exc, ConflictError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc), code=exc.code)

        if isinstance(exc, AuthenticationError):
            # → 401 Unauthorized
            return api_errors.Unauthorized(str(exc), code=exc.code)

        if isinstance(exc, UnprocessableError):
            # → 422 Unprocessable Entity
            return api_errors.APIError(message=str(exc), status_code=422, code=exc.code)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(message=str(exc), status_code=400, code=exc.code)

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
