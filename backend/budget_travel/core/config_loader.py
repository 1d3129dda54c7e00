# backend/budget_travel/core/config_loader.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: str = "development"

    # Flights always depart from here (no user location yet)
    default_origin_city: str = "New York"
    default_origin_airport: str = "JFK"

    cache_ttl_seconds: int = 3600
    cache_sweep_seconds: int = 900
    max_forecast_days: int = 14
    max_activities: int = 50

    log_level: str = "DEBUG"
    log_file_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
