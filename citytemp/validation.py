"""Syntactic checks on user-entered city names."""

import re

from citytemp.errors import ValidationError, ValidationErrorKind

MIN_CITY_LENGTH = 2
MAX_CITY_LENGTH = 50

# Latin letters, German umlauts/eszett, whitespace and hyphen.
_CITY_PATTERN = re.compile(r"[a-zA-ZäöüÄÖÜß\s\-]+")


def validate_city(raw: str) -> str:
    """Return the trimmed city name or raise ValidationError."""
    trimmed = (raw or "").strip()

    if not trimmed:
        raise ValidationError(ValidationErrorKind.EMPTY_INPUT, "Bitte eine Stadt eingeben")

    if len(trimmed) < MIN_CITY_LENGTH:
        raise ValidationError(
            ValidationErrorKind.TOO_SHORT,
            f"Stadt muss mindestens {MIN_CITY_LENGTH} Zeichen haben",
        )

    if len(trimmed) > MAX_CITY_LENGTH:
        raise ValidationError(
            ValidationErrorKind.TOO_LONG,
            f"Stadt darf maximal {MAX_CITY_LENGTH} Zeichen haben",
        )

    if not _CITY_PATTERN.fullmatch(trimmed):
        raise ValidationError(ValidationErrorKind.INVALID_CHARACTERS, "Ungültige Zeichen im Stadtnamen")

    return trimmed


def cache_key(city: str) -> str:
    """Normalize a validated city name into its cache key."""
    return city.lower()
