from __future__ import annotations

from typing import Protocol


class TokenEncryptor(Protocol):
    """Port for issuing signed, time-bound access tokens bound to a subject."""

    def encrypt(self, subject: str) -> str: ...


class StubTokenEncryptor(TokenEncryptor):
    """Deterministic token encryptor used in unit tests."""

    def __init__(self) -> None:
        self._seq = 0
        self._issued: dict[str, str] = {}

    def encrypt(self, subject: str) -> str:
        self._seq += 1
        token = f"access.{subject}.{self._seq}"
        self._issued[token] = subject
        return token

    def subject_of(self, token: str) -> str:
        """Return the subject a token was issued for (test helper)."""
        return self._issued[token]
