"""Favorites storage backends."""

from .base import FavoritesStore
from .memory import InMemoryFavoritesStore
from .redis import RedisFavoritesStore

__all__ = [
    "FavoritesStore",
    "InMemoryFavoritesStore",
    "RedisFavoritesStore",
]
