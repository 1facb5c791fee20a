"""Application configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the city temperature service."""
    model_config = SettingsConfigDict(env_prefix="CITYTEMP_", extra="ignore")

    data_source: str = "open_meteo"  # options: open_meteo
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    weather_url: str = "https://api.open-meteo.com/v1/forecast"
    geocoding_language: str = "de"
    suggestion_count: int = 5
    request_timeout_seconds: float = 10.0
    cache_ttl_seconds: int = 300
    favorites_redis_url: str | None = None
    favorites_redis_key: str = "favorites"
    log_level: str = "INFO"

    @field_validator("geocoding_url", "weather_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize endpoint URLs so query strings attach cleanly."""
        return str(v).rstrip("/")


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
