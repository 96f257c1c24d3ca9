# account_service/infra/system/token_generator.py
from __future__ import annotations

from uuid import uuid4

from account_service.services._shared.ports import UniqueTokenGenerator


class UUIDTokenGenerator(UniqueTokenGenerator):
    """Opaque refresh-token values: 32 hex chars from a random UUID4."""

    def generate(self) -> str:
        return uuid4().hex
