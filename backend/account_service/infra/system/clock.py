# account_service/infra/system/clock.py
from __future__ import annotations

from datetime import UTC, datetime

from account_service.services._shared.ports import Clock


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)
