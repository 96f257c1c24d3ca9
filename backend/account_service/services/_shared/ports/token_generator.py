from __future__ import annotations

from typing import Protocol


class UniqueTokenGenerator(Protocol):
    """Port producing collision-improbable opaque strings (refresh token values)."""

    def generate(self) -> str: ...


class SequentialTokenGenerator(UniqueTokenGenerator):
    """Predictable generator for unit tests: ``rt-1``, ``rt-2``, ..."""

    def __init__(self, prefix: str = "rt") -> None:
        self.prefix = prefix
        self._seq = 0

    def generate(self) -> str:
        self._seq += 1
        return f"{self.prefix}-{self._seq}"
