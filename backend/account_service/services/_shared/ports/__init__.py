"""
account_service.services._shared.ports
======================================

Collection of *ports* (hexagonal interfaces) that the use cases depend on.

These ports decouple the service layer from concrete implementations of
password hashing, token issuing, time, and persistence.

Modules
-------
- :mod:`clock`:
    Defines :class:`~.Clock` and the test double :class:`~.FixedClock`.

- :mod:`hash_provider`:
    Defines :class:`~.HashProvider` and the test double :class:`~.PlainHashProvider`.

- :mod:`token_encryptor`:
    Defines :class:`~.TokenEncryptor` (access tokens) and :class:`~.StubTokenEncryptor`.

- :mod:`token_generator`:
    Defines :class:`~.UniqueTokenGenerator` (refresh token values) and
    :class:`~.SequentialTokenGenerator`.

- :mod:`account_store`:
    Defines :class:`~.AccountStore` and :class:`~.InMemoryAccountStore`.

- :mod:`refresh_token_store`:
    Defines :class:`~.RefreshTokenStore` and :class:`~.InMemoryRefreshTokenStore`.

Design Notes
------------
Concrete adapters (SQLAlchemy, Redis, Werkzeug, Flask-JWT-Extended) implement
these interfaces under ``account_service.infra``.
"""

from __future__ import annotations

from .account_store import AccountStore, InMemoryAccountStore, normalize_email
from .clock import Clock, FixedClock
from .hash_provider import HashProvider, PlainHashProvider
from .refresh_token_store import InMemoryRefreshTokenStore, RefreshTokenStore
from .token_encryptor import StubTokenEncryptor, TokenEncryptor
from .token_generator import SequentialTokenGenerator, UniqueTokenGenerator

__all__ = [
    "AccountStore",
    "Clock",
    "FixedClock",
    "HashProvider",
    "InMemoryAccountStore",
    "InMemoryRefreshTokenStore",
    "PlainHashProvider",
    "RefreshTokenStore",
    "SequentialTokenGenerator",
    "StubTokenEncryptor",
    "TokenEncryptor",
    "UniqueTokenGenerator",
    "normalize_email",
]
