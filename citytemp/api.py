"""HTTP API for city temperature lookups, suggestions and favorites."""

from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel

from .app_types import CitySuggestion, TemperatureReading
from .config import settings
from .errors import (
    CityTemperatureError,
    GeocodingErrorKind,
    ValidationError,
)
from .favorites import add_favorite, clear_favorites, list_favorites, remove_favorite
from .temperature_service import build_temperature_service
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="citytemp/api")

router = APIRouter()
TEMPERATURE_SERVICE = build_temperature_service(settings)


class TemperatureResponse(BaseModel):
    """Serialized temperature reading."""
    city: str
    country: str = ""
    temperature_celsius: float


class SuggestionResponse(BaseModel):
    """Serialized autocomplete candidate."""
    name: str
    country: str = ""
    latitude: float
    longitude: float


class FavoriteRequest(BaseModel):
    """Incoming favorite city payload."""
    city: str


class FavoritesResponse(BaseModel):
    """Saved favorites in insertion order."""
    favorites: list[str]


def _status_for(exc: CityTemperatureError) -> int:
    """Map a lookup failure onto an HTTP status code."""
    if isinstance(exc, ValidationError):
        return 422
    if exc.kind is GeocodingErrorKind.CITY_NOT_FOUND:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_502_BAD_GATEWAY


def _to_http_error(exc: CityTemperatureError) -> HTTPException:
    """Convert a lookup failure to an HTTPException with a tagged detail."""
    return HTTPException(
        status_code=_status_for(exc),
        detail={"kind": exc.kind.value, "message": exc.message},
    )


def _serialize_reading(reading: TemperatureReading) -> TemperatureResponse:
    return TemperatureResponse(
        city=reading.city,
        country=reading.country,
        temperature_celsius=reading.temperature_celsius,
    )


def _serialize_suggestion(suggestion: CitySuggestion) -> SuggestionResponse:
    return SuggestionResponse(
        name=suggestion.name,
        country=suggestion.country,
        latitude=suggestion.latitude,
        longitude=suggestion.longitude,
    )


@router.get("/temperature", response_model=TemperatureResponse)
def get_temperature(city: str = Query(default="")):
    """Return the current temperature for a city name."""
    try:
        reading = TEMPERATURE_SERVICE.get_temperature(city)
    except CityTemperatureError as exc:
        logger.info(f"Temperature lookup failed: {exc!r}")
        raise _to_http_error(exc)
    return _serialize_reading(reading)


@router.get("/suggestions", response_model=list[SuggestionResponse])
def get_suggestions(q: str = Query(default="")):
    """Return autocomplete candidates for a partial city name."""
    try:
        suggestions = TEMPERATURE_SERVICE.suggest_cities(q)
    except CityTemperatureError as exc:
        logger.info(f"Suggestion lookup failed: {exc!r}")
        raise _to_http_error(exc)
    return [_serialize_suggestion(s) for s in suggestions]


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
def clear_cache():
    """Drop every cached reading."""
    TEMPERATURE_SERVICE.clear_cache()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/favorites", response_model=FavoritesResponse)
def get_favorites():
    """Return saved favorite cities."""
    return FavoritesResponse(favorites=list_favorites())


@router.post("/favorites", response_model=FavoritesResponse)
def post_favorite(req: FavoriteRequest):
    """Save a favorite city."""
    try:
        favorites = add_favorite(req.city)
    except ValidationError as exc:
        raise _to_http_error(exc)
    return FavoritesResponse(favorites=favorites)


@router.delete("/favorites/{city}", response_model=FavoritesResponse)
def delete_favorite(city: str):
    """Remove a favorite city."""
    return FavoritesResponse(favorites=remove_favorite(city))


@router.delete("/favorites", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_favorites():
    """Remove every favorite city."""
    clear_favorites()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
