"""Presentation boundary: loading/success/error signals and their HTML rendering."""

from __future__ import annotations

from html import escape
from typing import Optional, Protocol

from citytemp.app_types import TemperatureReading
from citytemp.errors import CityTemperatureError
from citytemp.temperature_service import TemperatureService
from citytemp.validation import validate_city
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="presenter")

GENERIC_ERROR_MESSAGE = "Temperatur konnte nicht abgerufen werden"


class Presenter(Protocol):
    """Receives exactly one of three signals per state change."""

    def loading(self) -> None:
        """A lookup has started."""

    def success(self, city: str, temperature: float, country: str = "") -> None:
        """A reading is available."""

    def error(self, message: str) -> None:
        """The lookup failed; `message` is shown verbatim (escaped)."""


class HtmlPresenter(Presenter):
    """Render the current state as an HTML fragment in `self.html`."""

    def __init__(self) -> None:
        self.state = "idle"
        self.html = ""

    def loading(self) -> None:
        self.state = "loading"
        self.html = '<div id="loading">Lade…</div>'

    def success(self, city: str, temperature: float, country: str = "") -> None:
        self.state = "success"
        country_suffix = f" ({escape(country)})" if country else ""
        self.html = (
            '<div id="result">'
            '<div class="weather-icon">🌡️</div>'
            f"<p>Die aktuelle Temperatur in <strong>{escape(city)}{country_suffix}</strong></p>"
            f'<p class="temperature">{escape(str(temperature))}°C</p>'
            "<small>Daten von Open-Meteo API</small>"
            "</div>"
        )

    def error(self, message: str) -> None:
        self.state = "error"
        self.html = f'<div id="error">⚠️ {escape(message)}</div>'

    def render_page(self, city: str = "") -> str:
        """Wrap the current fragment in the lookup form page."""
        return (
            "<!DOCTYPE html>"
            '<html lang="de"><head><meta charset="utf-8"><title>Wetter</title></head><body>'
            '<form id="weatherForm" method="get" action="/">'
            f'<input id="cityInput" name="city" value="{escape(city)}" maxlength="50" required>'
            '<button id="getTempButton" type="submit">Temperatur abrufen</button>'
            "</form>"
            f"{self.html}"
            "</body></html>"
        )


def present_temperature(
    service: TemperatureService,
    presenter: Presenter,
    raw_city: str,
) -> Optional[TemperatureReading]:
    """Run one lookup and drive `presenter`; never raises.

    Validation happens before the loading signal so an invalid submission
    goes straight to an error state.
    """
    try:
        # Invalid input never reaches the loading state; the service re-checks on its own.
        city = validate_city(raw_city)
        presenter.loading()
        reading = service.get_temperature(city)
    except CityTemperatureError as exc:
        logger.info("Lookup failed (%s): %s", exc.kind.value, exc.message)
        presenter.error(exc.message)
        return None
    except Exception:
        logger.exception("Unexpected failure while fetching temperature")
        presenter.error(GENERIC_ERROR_MESSAGE)
        return None

    presenter.success(reading.city, reading.temperature_celsius, reading.country)
    return reading
