"""Shared dataclasses and lightweight types used across modules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Geocoding result: position plus the provider's display name."""
    latitude: float
    longitude: float
    name: str
    country: str = ""


@dataclass(frozen=True)
class TemperatureReading:
    """Current temperature for a resolved city; the unit of caching."""
    city: str
    country: str
    temperature_celsius: float


@dataclass
class CacheEntry:
    """TemperatureReading with the wall-clock time (ms) it was stored."""
    value: TemperatureReading
    stored_at_epoch_millis: int


@dataclass(frozen=True)
class CitySuggestion:
    """One autocomplete candidate from the geocoding endpoint."""
    name: str
    country: str
    latitude: float
    longitude: float
