"""Redis-backed favorites store (JSON list under a single key)."""

import json
from typing import Callable, List

from redis.exceptions import WatchError

from citytemp.favorites_store.base import FavoritesStore
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="favorites_store/redis_favorites_store")


class RedisFavoritesStore(FavoritesStore):
    """Persist favorites across restarts in Redis.

    Updates run as WATCH/MULTI transactions on the list key and are retried
    when another writer changed the key in between.
    """

    def __init__(self, client, key: str = "favorites") -> None:
        """Initialize with a Redis client and the key holding the list."""
        logger.debug("Initializing RedisFavoritesStore")
        self.client = client
        self.key = key

    @staticmethod
    def _decode(raw) -> List[str]:
        """Decode a stored payload; unreadable payloads count as empty."""
        if not raw:
            return []
        try:
            data = json.loads(raw.decode("utf-8") if isinstance(raw, bytes) else raw)
        except ValueError as exc:
            logger.error("Failed to decode favorites payload: %s", exc)
            return []
        if not isinstance(data, list):
            return []
        return [str(item) for item in data]

    @staticmethod
    def _encode(cities: List[str]) -> bytes:
        return json.dumps(cities, ensure_ascii=False).encode("utf-8")

    def _update(self, mutate: Callable[[List[str]], List[str]]) -> List[str]:
        """Apply `mutate` to the stored list atomically and return the result."""
        with self.client.pipeline() as pipe:
            while True:
                try:
                    pipe.watch(self.key)
                    cities = self._decode(pipe.get(self.key))
                    updated = mutate(list(cities))
                    if updated == cities:
                        pipe.unwatch()
                        return cities
                    pipe.multi()
                    pipe.set(self.key, self._encode(updated))
                    pipe.execute()
                    return updated
                except WatchError:
                    logger.debug("Favorites key %r changed during update; retrying", self.key)

    def list(self) -> List[str]:
        return self._decode(self.client.get(self.key))

    def add(self, city: str) -> List[str]:
        return self._update(lambda cities: cities if city in cities else cities + [city])

    def remove(self, city: str) -> List[str]:
        return self._update(lambda cities: [c for c in cities if c != city])

    def clear(self) -> None:
        self.client.delete(self.key)
