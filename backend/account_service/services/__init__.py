"""Service layer public API.

Callers can import the use cases from :mod:`account_service.services`
without knowing the internal structure.

Re-exports
----------
- Base primitives (from ``account_service.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Use cases, one ``execute(dto)`` each
    * :class:`AccountRegistrationService` (:class:`RegisterAccountIn`)
    * :class:`CredentialVerificationService` (:class:`AuthenticateIn` -> :class:`AccessTokenOut`)
    * :class:`PasswordRotationService` (:class:`ChangePasswordIn`)
    * :class:`SessionStartService` (:class:`AuthenticateIn` -> :class:`AuthenticationOut`)
    * :class:`SessionRefreshService` (:class:`RefreshSessionIn` -> :class:`AuthenticationOut`)
    * :class:`ProfileLookupService`, :class:`ProfileRenameService`,
      :class:`EmailChangeService`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from .credentials.dto import AccessTokenOut, AuthenticateIn
from .credentials.service import CredentialVerificationService, verify_credentials
from .password.dto import ChangePasswordIn
from .password.service import PasswordRotationService
from .profile.dto import ChangeEmailIn, GetProfileIn, RenameAccountIn
from .profile.service import EmailChangeService, ProfileLookupService, ProfileRenameService
from .registration.dto import RegisterAccountIn
from .registration.service import AccountRegistrationService
from .session.dto import AuthenticationOut, RefreshSessionIn
from .session.service import SessionRefreshService, SessionStartService

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Registration
    "AccountRegistrationService",
    "RegisterAccountIn",
    # Credentials
    "CredentialVerificationService",
    "AuthenticateIn",
    "AccessTokenOut",
    "verify_credentials",
    # Password
    "PasswordRotationService",
    "ChangePasswordIn",
    # Sessions
    "SessionStartService",
    "SessionRefreshService",
    "RefreshSessionIn",
    "AuthenticationOut",
    # Profile
    "ProfileLookupService",
    "ProfileRenameService",
    "EmailChangeService",
    "GetProfileIn",
    "RenameAccountIn",
    "ChangeEmailIn",
]
