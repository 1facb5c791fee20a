"""Favorites facade over pluggable backends."""
from typing import List

import redis

from citytemp.config import settings
from citytemp.favorites_store import FavoritesStore, InMemoryFavoritesStore, RedisFavoritesStore
from citytemp.validation import validate_city
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="favorites")


def _init_store() -> FavoritesStore:
    """Initialize the backing favorites store based on configuration."""
    redis_url = settings.favorites_redis_url
    logger.debug(f"Initializing favorites store: redis_url='{mask_url(redis_url) if redis_url else 'None'}'")
    if redis_url:
        try:
            client = redis.Redis.from_url(redis_url)
            client.ping()
            logger.info("Using RedisFavoritesStore at %s", mask_url(redis_url))
            return RedisFavoritesStore(client, key=settings.favorites_redis_key)
        except (redis.RedisError, ValueError) as exc:
            logger.warning("Falling back to InMemoryFavoritesStore (Redis unavailable): %s", exc)
    return InMemoryFavoritesStore()


_store: FavoritesStore = _init_store()


def use_in_memory_store_for_tests() -> None:
    """Override store for tests to ensure isolation and determinism."""
    global _store
    _store = InMemoryFavoritesStore()


def list_favorites() -> List[str]:
    """Return saved city names in insertion order."""
    return _store.list()


def add_favorite(raw_city: str) -> List[str]:
    """Validate and save a city name; duplicates are ignored."""
    city = validate_city(raw_city)
    return _store.add(city)


def remove_favorite(raw_city: str) -> List[str]:
    """Remove a saved city name if present."""
    return _store.remove((raw_city or "").strip())


def clear_favorites() -> None:
    """Remove every saved city."""
    _store.clear()
