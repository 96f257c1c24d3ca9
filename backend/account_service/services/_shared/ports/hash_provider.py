from __future__ import annotations

import hmac
from typing import Protocol


class HashProvider(Protocol):
    """Port for one-way password hashing and verification."""

    def hash(self, plain: str) -> str:
        """Return a salted one-way hash of ``plain``."""
        ...

    def compare(self, plain: str, hashed: str) -> bool:
        """Return ``True`` iff ``plain`` hashes to ``hashed``."""
        ...


class PlainHashProvider(HashProvider):
    """
    Reversible, predictable "hash" used in unit tests.

    .. warning::
       Never wire this outside tests: the output embeds the plaintext.
    """

    PREFIX = "hashed:"

    def hash(self, plain: str) -> str:
        return f"{self.PREFIX}{plain}"

    def compare(self, plain: str, hashed: str) -> bool:
        return hmac.compare_digest(f"{self.PREFIX}{plain}", hashed)
