from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Runtime knobs for the demo driver, read from PATTERNKIT_* variables or .env."""

    # Logging
    log_level: str = "INFO"

    # Settings store
    settings_file: str = "config.txt"
    source_identifier: str = "postgresql://admin@localhost:5432/mydb"

    model_config = SettingsConfigDict(
        env_prefix="PATTERNKIT_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_app_settings() -> AppSettings:
    """Get the application settings, built once per process."""
    return AppSettings()
