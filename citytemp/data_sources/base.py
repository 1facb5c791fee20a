"""Interfaces and helpers for geocoding and weather data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Protocol

from citytemp.app_types import CitySuggestion, Coordinates


class GeocodingClient(Protocol):
    """Anything that can turn a city name into coordinates."""

    def resolve(self, city: str) -> Coordinates:
        """Return the best match or raise GeocodingError."""
        ...

    def suggest(self, query: str, count: int = 5) -> List[CitySuggestion]:
        """Return up to `count` candidates; empty when nothing matches."""
        ...


class WeatherClient(Protocol):
    """Anything that can report the current temperature at a position."""

    def current_temperature(self, coords: Coordinates) -> float:
        """Return the temperature in °C or raise WeatherError."""
        ...


@dataclass
class CallableGeocodingClient(GeocodingClient):
    """Wrap lookup callables so they can be swapped for different backends."""

    lookup: Callable[[str], Coordinates]
    search: Callable[..., List[CitySuggestion]]

    def resolve(self, city: str) -> Coordinates:
        """Delegate to the configured lookup callable."""
        return self.lookup(city)

    def suggest(self, query: str, count: int = 5) -> List[CitySuggestion]:
        """Delegate to the configured search callable."""
        return self.search(query, count=count)


@dataclass
class CallableWeatherClient(WeatherClient):
    """Wrap a `(latitude, longitude) -> float` callable."""

    temperature: Callable[[float, float], float]

    def current_temperature(self, coords: Coordinates) -> float:
        """Delegate to the configured temperature callable."""
        return self.temperature(coords.latitude, coords.longitude)
