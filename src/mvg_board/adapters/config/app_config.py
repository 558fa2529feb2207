"""12-factor configuration adapter using environment variables."""

import logging
from typing import Annotated, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from mvg_board.adapters.mvg_api.mvg_departure_repository import MVG_DEPARTURE_URL
from mvg_board.domain.models.stop_configuration import (
    DEFAULT_TRANSPORT_TYPES,
    StopConfiguration,
)

KNOWN_TRANSPORT_TYPES = ("UBAHN", "SBAHN", "BUS", "TRAM", "BAHN", "REGIONAL_BUS")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every setting can be overridden by an ``MVG_BOARD_``-prefixed environment
    variable or a ``.env`` file. The defaults describe the Oberschleißheim stop.
    """

    model_config = SettingsConfigDict(
        env_prefix="MVG_BOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MVG API configuration
    api_url: str = Field(
        default=MVG_DEPARTURE_URL,
        description="Departure board endpoint",
    )
    global_id: str = Field(default="de:09184:2000", description="Global id of the monitored stop")
    limit: int = Field(default=14, description="Maximum number of departures to fetch")
    offset_minutes: int = Field(default=0, description="Offset in minutes for departure queries")
    transport_types: Annotated[list[str], NoDecode] = Field(
        default=list(DEFAULT_TRANSPORT_TYPES),
        description="Transport types to request, e.g. SBAHN,BUS,UBAHN,TRAM",
    )
    mvg_api_timeout: float | None = Field(
        default=None,
        description="Total timeout for MVG API requests in seconds (None: HTTP client default)",
    )
    log_requests: bool = Field(default=False, description="Log outgoing API requests")

    # Scheduling
    refresh_interval_seconds: float = Field(
        default=5, description="Pause between the end of one refresh and the next"
    )
    clock_interval_seconds: float = Field(default=1, description="Clock update interval")

    # Display configuration
    timezone: str | None = Field(
        default=None,
        description="IANA timezone for displayed times (None: system local time)",
    )
    time_format: str = Field(default="at", description="Time format: 'at' or 'minutes'")
    clock_format: str = Field(default="%H:%M:%S", description="strftime format for the clock")
    log_level: str = Field(default="INFO", description="Root logging level")

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("transport_types", mode="before")
    @classmethod
    def split_transport_types(cls, v: Any) -> Any:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v

    @field_validator("transport_types")
    @classmethod
    def validate_transport_types(cls, v: list[str]) -> list[str]:
        """Validate transport types against the types the API knows."""
        normalized = [t.upper() for t in v]
        unknown = [t for t in normalized if t not in KNOWN_TRANSPORT_TYPES]
        if unknown:
            raise ValueError(
                f"transport_types contains unknown types {unknown}; "
                f"expected any of {', '.join(KNOWN_TRANSPORT_TYPES)}"
            )
        if not normalized:
            raise ValueError("transport_types must not be empty")
        return normalized

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        """Validate the departure limit is within what the API serves."""
        if not 1 <= v <= 100:
            raise ValueError("limit must be between 1 and 100")
        return v

    @field_validator("refresh_interval_seconds", "clock_interval_seconds")
    @classmethod
    def validate_interval(cls, v: float) -> float:
        """Validate intervals are positive."""
        if v <= 0:
            raise ValueError("intervals must be positive")
        return v

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Validate time format is either 'at' or 'minutes'."""
        if v not in ("at", "minutes"):
            raise ValueError("time_format must be either 'at' or 'minutes'")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate the timezone is a known IANA name."""
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is one logging understands."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_tzinfo(self) -> ZoneInfo | None:
        """Return the configured zone, or None for system local time."""
        return ZoneInfo(self.timezone) if self.timezone else None

    def get_stop_configuration(self) -> StopConfiguration:
        """Build the stop configuration the departure service queries."""
        return StopConfiguration(
            station_id=self.global_id,
            limit=self.limit,
            offset_minutes=self.offset_minutes,
            transport_types=tuple(self.transport_types),
        )
