"""Factory helpers for choosing geocoding/weather backends at startup."""

from __future__ import annotations

from functools import partial

from citytemp import config
from citytemp.data_sources.base import (
    CallableGeocodingClient,
    CallableWeatherClient,
    GeocodingClient,
    WeatherClient,
)
from citytemp.data_sources.open_meteo_client import (
    fetch_city_suggestions,
    fetch_coordinates,
    fetch_current_temperature,
)
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


DEFAULT_SOURCE_NAME = "open_meteo"


def _source_name(settings) -> str:
    """Return the configured backend name, validated."""
    source = (getattr(settings, "data_source", None) or DEFAULT_SOURCE_NAME).lower()
    if source != "open_meteo":
        raise ValueError(f"Unknown data source '{source}'")
    return source


def build_geocoding_client(settings: config.Settings | None = None) -> GeocodingClient:
    """Instantiate the configured geocoding client."""
    settings = settings or config.settings
    _source_name(settings)
    logger.info("Using Open-Meteo geocoding at %s", settings.geocoding_url)
    return CallableGeocodingClient(
        lookup=partial(
            fetch_coordinates,
            url=settings.geocoding_url,
            language=settings.geocoding_language,
            timeout=settings.request_timeout_seconds,
        ),
        search=partial(
            fetch_city_suggestions,
            url=settings.geocoding_url,
            language=settings.geocoding_language,
            timeout=settings.request_timeout_seconds,
        ),
    )


def build_weather_client(settings: config.Settings | None = None) -> WeatherClient:
    """Instantiate the configured weather client."""
    settings = settings or config.settings
    _source_name(settings)
    logger.info("Using Open-Meteo forecast at %s", settings.weather_url)
    return CallableWeatherClient(
        temperature=partial(
            fetch_current_temperature,
            url=settings.weather_url,
            timeout=settings.request_timeout_seconds,
        ),
    )
