"""In-memory temperature cache with a fixed TTL."""

import threading
import time
from typing import Callable, Optional

from citytemp.app_types import CacheEntry, TemperatureReading
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="cache/temperature_cache")

DEFAULT_TTL_SECONDS = 300


class TemperatureCache:
    """Thread-safe mapping of lowercased city name -> TemperatureReading.

    Entries expire `ttl_seconds` after they were stored and are removed lazily
    on the next lookup; nothing sweeps them proactively and there is no size
    bound. `clock` returns epoch seconds and is injectable for tests.
    """

    def __init__(self, ttl_seconds: int = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.time) -> None:
        """Initialize an empty cache."""
        logger.debug("Initializing TemperatureCache")
        self.ttl_millis = int(ttl_seconds * 1000)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def _now_millis(self) -> int:
        """Return the current clock reading in epoch milliseconds."""
        return int(self._clock() * 1000)

    def get(self, key: str) -> Optional[TemperatureReading]:
        """Return the cached reading, or None if missing/expired."""
        normalized = key.lower()
        with self._lock:
            entry = self._entries.get(normalized)
            if entry is None:
                return None
            if self._now_millis() - entry.stored_at_epoch_millis > self.ttl_millis:
                self._entries.pop(normalized, None)
                logger.debug("Cache entry for %r expired", normalized)
                return None
            return entry.value

    def set(self, key: str, value: TemperatureReading) -> None:
        """Insert or overwrite an entry stamped with the current time."""
        with self._lock:
            self._entries[key.lower()] = CacheEntry(value=value, stored_at_epoch_millis=self._now_millis())

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
