# backend/budget_travel/db/response_cache.py

import json
import time
from typing import Any, Callable, Dict, Optional

from budget_travel.core.config_loader import settings
from budget_travel.core.logger import logger


def generate_cache_key(endpoint: str, params: Dict[str, Any]) -> str:
    """Same params in any order give the same key."""
    return f"{endpoint}-{json.dumps(params, sort_keys=True, default=str)}"


class ResponseCache:
    """
    In-memory TTL store for inventory responses.

    Handed to the API layer as a dependency; the generators never see it.
    """

    def __init__(
        self,
        default_ttl: Optional[float] = None,
        sweep_interval: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl if default_ttl is not None else settings.cache_ttl_seconds
        self.sweep_interval = sweep_interval if sweep_interval is not None else settings.cache_sweep_seconds
        self._clock = clock
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() > entry["expires_at"]:
            del self._entries[key]
            return None

        return entry["data"]

    def set(self, key: str, data: Any, ttl: Optional[float] = None) -> None:
        now = self._clock()
        # entries for keys nobody reads again only leave through a sweep
        if now - self._last_sweep >= self.sweep_interval:
            removed = self.expire()
            self._last_sweep = now
            if removed:
                logger.debug(f"Response cache sweep removed {removed} expired entries")

        self._entries[key] = {
            "data": data,
            "timestamp": now,
            "expires_at": now + (ttl if ttl is not None else self.default_ttl),
        }

        if len(self._entries) % 10 == 0:
            logger.debug(f"Response cache size: {len(self._entries)} entries")

    def expire(self) -> int:
        """Drop expired entries, return how many were removed."""
        now = self._clock()
        expired = [k for k, v in self._entries.items() if now > v["expires_at"]]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def clear_endpoint(self, endpoint: str) -> None:
        prefix = f"{endpoint}-"
        for k in [k for k in self._entries if k.startswith(prefix)]:
            del self._entries[k]
