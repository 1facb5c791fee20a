"""Error taxonomy for city temperature lookups.

Each failure carries a `kind` so callers can branch on the category instead
of parsing message text. `message` is short, user-facing and safe to show
as-is; transport diagnostics belong in the logs, not in the message.
"""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reasons a raw city string is rejected before any network call."""
    EMPTY_INPUT = "empty_input"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_CHARACTERS = "invalid_characters"


class GeocodingErrorKind(str, Enum):
    """Failures while resolving a city name to coordinates."""
    TRANSPORT_ERROR = "transport_error"
    CITY_NOT_FOUND = "city_not_found"


class WeatherErrorKind(str, Enum):
    """Failures while fetching the current temperature."""
    TRANSPORT_ERROR = "transport_error"
    DATA_UNAVAILABLE = "data_unavailable"


class CityTemperatureError(Exception):
    """Base class for every terminal lookup failure."""

    def __init__(self, kind: Enum, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class ValidationError(CityTemperatureError):
    """Raw input failed the syntactic checks."""
    kind: ValidationErrorKind


class GeocodingError(CityTemperatureError):
    """The geocoding endpoint failed or knew no such city."""
    kind: GeocodingErrorKind


class WeatherError(CityTemperatureError):
    """The forecast endpoint failed or returned no temperature."""
    kind: WeatherErrorKind
