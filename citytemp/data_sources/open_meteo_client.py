"""Helpers for resolving cities and current temperatures via the Open-Meteo APIs."""
from __future__ import annotations

from typing import Any, List, Type

import requests

from citytemp.app_types import CitySuggestion, Coordinates
from citytemp.errors import (
    CityTemperatureError,
    GeocodingError,
    GeocodingErrorKind,
    WeatherError,
    WeatherErrorKind,
)
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag='open_meteo_client')

session = requests.Session()

OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
OPEN_METEO_WEATHER_URL = "https://api.open-meteo.com/v1/forecast"

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LANGUAGE = "de"


def _get_json(
    url: str,
    params: dict,
    *,
    timeout: float,
    error_cls: Type[CityTemperatureError],
    transport_kind: Any,
    api_label: str,
) -> dict:
    """GET `url` and decode its JSON body, mapping HTTP-layer failures to `error_cls`."""
    try:
        resp = session.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else "?"
        logger.warning("%s request failed with status %s: %s", api_label, status, exc)
        raise error_cls(transport_kind, f"{api_label} API Fehler: {status}") from exc
    except requests.RequestException as exc:
        logger.warning("%s request did not complete: %s", api_label, exc)
        raise error_cls(transport_kind, f"{api_label} API nicht erreichbar") from exc

    return data if isinstance(data, dict) else {}


def _search(query: str, *, count: int, url: str, language: str, timeout: float) -> list:
    """Run a geocoding search and return the raw `results` list (possibly empty)."""
    params = {
        "name": query,
        "count": count,
        "language": language,
        "format": "json",
    }
    data = _get_json(
        url,
        params,
        timeout=timeout,
        error_cls=GeocodingError,
        transport_kind=GeocodingErrorKind.TRANSPORT_ERROR,
        api_label="Geocoding",
    )
    return data.get("results") or []


def fetch_coordinates(
    city: str,
    *,
    url: str = OPEN_METEO_GEOCODING_URL,
    language: str = DEFAULT_LANGUAGE,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Coordinates:
    """Resolve a city name to the first matching location."""
    results = _search(city, count=1, url=url, language=language, timeout=timeout)
    first = results[0] if results else {}
    if "latitude" not in first or "longitude" not in first:
        logger.info("No geocoding match with coordinates for %r", city)
        raise GeocodingError(GeocodingErrorKind.CITY_NOT_FOUND, f'Stadt "{city}" wurde nicht gefunden')

    return Coordinates(
        latitude=first["latitude"],
        longitude=first["longitude"],
        name=first.get("name") or city,
        country=first.get("country") or "",
    )


def fetch_city_suggestions(
    query: str,
    *,
    count: int = 5,
    url: str = OPEN_METEO_GEOCODING_URL,
    language: str = DEFAULT_LANGUAGE,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> List[CitySuggestion]:
    """Return up to `count` candidate cities for autocomplete."""
    results = _search(query, count=count, url=url, language=language, timeout=timeout)
    out: List[CitySuggestion] = []
    for item in results:
        if "latitude" not in item or "longitude" not in item:
            continue
        out.append(
            CitySuggestion(
                name=item.get("name", ""),
                country=item.get("country") or "",
                latitude=item["latitude"],
                longitude=item["longitude"],
            )
        )
    return out


def fetch_current_temperature(
    latitude: float,
    longitude: float,
    *,
    url: str = OPEN_METEO_WEATHER_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> float:
    """Fetch the current 2 m temperature (°C) exactly as the provider reports it."""
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": "temperature_2m",
    }
    data = _get_json(
        url,
        params,
        timeout=timeout,
        error_cls=WeatherError,
        transport_kind=WeatherErrorKind.TRANSPORT_ERROR,
        api_label="Weather",
    )

    current = data.get("current") or {}
    temperature = current.get("temperature_2m")
    if temperature is None:
        logger.warning("Forecast response lacks current.temperature_2m (keys: %s)", sorted(data))
        raise WeatherError(WeatherErrorKind.DATA_UNAVAILABLE, "Keine Wetterdaten verfügbar")
    return temperature
