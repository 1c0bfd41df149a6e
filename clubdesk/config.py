"""Application configuration using pydantic-settings.

Values are loaded from CLUBDESK_* environment variables or a .env file.
Formatting helpers read their defaults from here when called without
explicit arguments.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Console settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLUBDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Money display
    currency_symbol: str = Field(default="₴", description="Label appended to formatted costs")
    currency_decimals: int = Field(default=2, ge=0, le=10, description="Fixed decimals for costs")

    # Date display
    missing_value: str = Field(default="Н/Д", description="Placeholder for unparseable dates")
    timezone: str = Field(default="Europe/Kyiv", description="Timezone for date display")

    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded lazily on first access, so importing the package never
    touches the environment.
    """
    return Settings()
