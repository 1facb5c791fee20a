"""Chain validation, caching, geocoding and weather lookups into one reading."""
from __future__ import annotations

from typing import List, Optional

from citytemp import config
from citytemp.app_types import CitySuggestion, TemperatureReading
from citytemp.cache import TemperatureCache
from citytemp.data_sources import (
    GeocodingClient,
    WeatherClient,
    build_geocoding_client,
    build_weather_client,
)
from citytemp.validation import cache_key, validate_city
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="temperature_service")


class TemperatureService:
    """Resolve a raw city string to its current temperature.

    Failures from validation, geocoding and weather lookups propagate
    unchanged; only complete readings are cached, never coordinates.
    """

    def __init__(
        self,
        geocoder: GeocodingClient,
        weather: WeatherClient,
        cache: Optional[TemperatureCache] = None,
        *,
        suggestion_count: int = 5,
    ) -> None:
        self.geocoder = geocoder
        self.weather = weather
        self.cache = cache if cache is not None else TemperatureCache()
        self.suggestion_count = suggestion_count

    def get_temperature(self, raw_city: str) -> TemperatureReading:
        """Return the (possibly cached) reading for `raw_city`."""
        city = validate_city(raw_city)
        key = cache_key(city)

        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Serving reading for %r from cache", city)
            return cached

        location = self.geocoder.resolve(city)
        logger.debug(f"Resolved {city!r} to {location}")

        temperature = self.weather.current_temperature(location)
        logger.debug(f"Current temperature for {location.name!r}: {temperature}")

        reading = TemperatureReading(
            city=location.name,
            country=location.country,
            temperature_celsius=temperature,
        )
        self.cache.set(key, reading)
        return reading

    def suggest_cities(self, raw_query: str) -> List[CitySuggestion]:
        """Return autocomplete candidates for a partially typed city."""
        query = validate_city(raw_query)
        return self.geocoder.suggest(query, count=self.suggestion_count)

    def clear_cache(self) -> None:
        """Forget every cached reading."""
        logger.info("Clearing temperature cache (%d entries)", len(self.cache))
        self.cache.clear()


def build_temperature_service(settings: config.Settings | None = None) -> TemperatureService:
    """Wire a service from configuration with a fresh, empty cache."""
    settings = settings or config.settings
    return TemperatureService(
        geocoder=build_geocoding_client(settings),
        weather=build_weather_client(settings),
        cache=TemperatureCache(ttl_seconds=settings.cache_ttl_seconds),
        suggestion_count=settings.suggestion_count,
    )
