"""RateLimiter — per-client cooldown over an in-memory map."""
import logging
import time
from typing import Callable, Optional

from src.constants import (
    LOOPBACK_CLIENT_ID,
    MSG_RATE_LIMIT_HIT,
    MSG_RATE_LIMIT_SWEPT,
    RATE_LIMIT_EVICTION_FACTOR,
    RATE_LIMIT_INTERVAL_MS,
)

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


def client_id_from_forwarded_for(header: Optional[str]) -> str:
    """First hop of X-Forwarded-For, or the loopback placeholder. Not verified."""
    match (header or "").split(",")[0].strip():
        case "":
            return LOOPBACK_CLIENT_ID
        case client_id:
            return client_id


class RateLimiter:
    """Allows one accepted request per client per ``interval_ms``.

    Rejected requests do not refresh the client's timestamp. Entries idle for
    longer than ``eviction_factor`` cooldowns are dropped on the next call, so
    the map only holds recently active clients. Must be called from a single
    event loop: check and record happen without an await in between.
    """

    def __init__(
        self,
        interval_ms: int = RATE_LIMIT_INTERVAL_MS,
        eviction_factor: int = RATE_LIMIT_EVICTION_FACTOR,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._interval_ms = interval_ms
        self._horizon_ms = interval_ms * max(eviction_factor, 1)
        self._clock = clock
        self._last_request: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._last_request)

    def check_and_record(self, client_id: str, now: Optional[int] = None) -> bool:
        current = self._clock() if now is None else now
        self._sweep(current)
        match self._last_request.get(client_id):
            case int(last) if current - last < self._interval_ms:
                logger.warning(MSG_RATE_LIMIT_HIT, client_id)
                return False
            case _:
                self._last_request[client_id] = current
                return True

    def _sweep(self, current: int) -> None:
        stale = [
            client_id
            for client_id, last in self._last_request.items()
            if current - last > self._horizon_ms
        ]
        list(map(self._last_request.pop, stale))
        match len(stale):
            case 0:
                pass
            case n:
                logger.debug(MSG_RATE_LIMIT_SWEPT, n)
