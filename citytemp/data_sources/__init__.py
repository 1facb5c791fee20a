"""Data source factories for plugging different geocoding/weather backends."""

from .base import CallableGeocodingClient, CallableWeatherClient, GeocodingClient, WeatherClient
from .factory import build_geocoding_client, build_weather_client
from .open_meteo_client import (
    fetch_city_suggestions,
    fetch_coordinates,
    fetch_current_temperature,
)

__all__ = [
    "build_geocoding_client",
    "build_weather_client",
    "GeocodingClient",
    "WeatherClient",
    "CallableGeocodingClient",
    "CallableWeatherClient",
    "fetch_city_suggestions",
    "fetch_coordinates",
    "fetch_current_temperature",
]
