from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["*"]
    STATIC_DIR: Optional[str] = None

    # Database
    DATABASE_URL: str

    # Geocoding (Google Maps)
    GEOCODE_API_KEY: str = ""
    GEOCODE_API_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"

    # Weather (Dark Sky compatible)
    WEATHER_API_KEY: str = ""
    WEATHER_API_URL: str = "https://api.darksky.net/forecast"

    # Events (Eventbrite)
    EVENTBRITE_API_KEY: str = ""
    EVENTS_API_URL: str = "https://www.eventbriteapi.com/v3/events/search"

    @field_validator("DATABASE_URL")
    @classmethod
    def _use_async_driver(cls, v: str) -> str:
        # Heroku-style URLs name no driver; the engine needs asyncpg.
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v[len(prefix):]
        return v


settings = Settings()
