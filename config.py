"""
Configuration module for the HMS Doctor appointment screen core.
Loads settings from environment variables and an optional .env file.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level"
    )

    # Calendar Configuration
    calendar_timezone: str = Field(
        default="",
        alias="CALENDAR_TIMEZONE",
        description="IANA time zone used for calendar-day comparison (empty = device local)"
    )

    # Sample Data
    seed_sample_appointments: bool = Field(
        default=False,
        alias="SEED_SAMPLE_APPOINTMENTS",
        description="Seed the demo appointments for today at startup"
    )

    @field_validator("calendar_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        value = value.strip()
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown time zone: {value!r}") from exc
        return value

    @property
    def calendar_tzinfo(self):
        """The configured zone, or None for the device's local zone."""
        return ZoneInfo(self.calendar_timezone) if self.calendar_timezone else None


# Global settings instance
settings = Settings()
