# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, cast
from uuid import uuid4

import redis  # type: ignore[import-untyped]

from account_service.services._shared.entities import RefreshToken
from account_service.services._shared.ports import RefreshTokenStore


def _s(value: Any) -> str:
    # Clients may or may not be created with ``decode_responses=True``
    return value.decode() if isinstance(value, bytes | bytearray) else str(value)


@dataclass(slots=True)
class RedisRefreshTokenStore(RefreshTokenStore):
    """
    Redis-backed refresh token store.

    Layout:

    * ``rt:t:<token>``: hash ``{id, user_id, expires_in}``.
    * ``rt:id:<id>``: string pointing back at the token value.
    * ``rt:exp``: sorted set of ids scored by ``expires_in`` (epoch seconds).

    Keys outlive ``expires_in`` by ``retention`` so an expired token is still
    found and reported as expired rather than unknown. Redis drops them
    afterwards on its own; ``delete_expired`` clears them earlier on demand.

    :param r: A Redis client (already connected).
    :param retention: How long records are kept past their expiry.
    """

    r: redis.Redis
    retention: timedelta = timedelta(days=1)

    # -------------------- helpers --------------------

    @staticmethod
    def _kt(token: str) -> str:
        return f"rt:t:{token}"

    @staticmethod
    def _kid(token_id: str) -> str:
        return f"rt:id:{token_id}"

    _KEXP = "rt:exp"

    def _to_record(self, token: str, h: dict[Any, Any]) -> RefreshToken:
        fields = {_s(k): _s(v) for k, v in h.items()}
        return RefreshToken(
            id=fields["id"],
            token=token,
            user_id=fields["user_id"],
            expires_in=datetime.fromisoformat(fields["expires_in"]).astimezone(UTC),
        )

    # -------------------- API ------------------------

    def find_by_token(self, token: str) -> RefreshToken | None:
        h = self.r.hgetall(self._kt(token))
        if not h:
            return None
        return self._to_record(token, h)

    def create(self, *, token: str, user_id: str, expires_in: datetime) -> RefreshToken:
        record = RefreshToken(
            id=str(uuid4()), token=token, user_id=user_id, expires_in=expires_in.astimezone(UTC)
        )
        evict_at = record.expires_in + self.retention

        pipe = self.r.pipeline(transaction=True)
        pipe.hset(
            self._kt(token),
            mapping={
                "id": record.id,
                "user_id": user_id,
                # ISO keeps microseconds so the expiry boundary is exact
                "expires_in": record.expires_in.isoformat(),
            },
        )
        pipe.set(self._kid(record.id), token)
        pipe.pexpireat(self._kt(token), evict_at)
        pipe.pexpireat(self._kid(record.id), evict_at)
        pipe.zadd(self._KEXP, {record.id: record.expires_in.timestamp()})
        pipe.execute()
        return record

    def delete_by_id(self, token_id: str) -> bool:
        token = self.r.get(self._kid(token_id))
        if token is None:
            # Keys already evicted by their TTL; drop the stale index entry
            self.r.zrem(self._KEXP, token_id)
            return False

        with self.r.pipeline(transaction=True) as p:
            p.delete(self._kid(token_id))
            p.delete(self._kt(_s(token)))
            p.zrem(self._KEXP, token_id)
            out = cast(list[int], p.execute())

        # Only the caller whose DEL removed the id key wins a concurrent race
        return bool(out[0])

    def delete_expired(self, now: datetime) -> int:
        # Exclusive upper bound: records expiring exactly at ``now`` are still valid
        ids = [_s(i) for i in self.r.zrangebyscore(self._KEXP, "-inf", f"({now.timestamp()}")]
        return sum(1 for token_id in ids if self.delete_by_id(token_id))
