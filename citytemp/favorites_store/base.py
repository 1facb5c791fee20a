"""Shared protocol for favorites storage backends."""

from typing import List, Protocol


class FavoritesStore(Protocol):
    """Protocol for favorites storage backends."""

    def list(self) -> List[str]:
        """Return saved city names in insertion order."""

    def add(self, city: str) -> List[str]:
        """Append `city` unless already present; return the updated list."""

    def remove(self, city: str) -> List[str]:
        """Drop `city` if present; return the updated list."""

    def clear(self) -> None:
        """Remove every saved city."""
