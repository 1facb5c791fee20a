"""In-memory favorites store, intended for development and tests."""

import threading
from typing import List

from citytemp.favorites_store.base import FavoritesStore
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="favorites_store/in_memory_favorites_store")


class InMemoryFavoritesStore(FavoritesStore):
    """Thread-safe favorites list that lives as long as the process."""

    def __init__(self) -> None:
        logger.debug("Initializing InMemoryFavoritesStore")
        self._cities: List[str] = []
        self._lock = threading.Lock()

    def list(self) -> List[str]:
        with self._lock:
            return list(self._cities)

    def add(self, city: str) -> List[str]:
        with self._lock:
            if city not in self._cities:
                self._cities.append(city)
            return list(self._cities)

    def remove(self, city: str) -> List[str]:
        with self._lock:
            if city in self._cities:
                self._cities.remove(city)
            return list(self._cities)

    def clear(self) -> None:
        with self._lock:
            self._cities.clear()
