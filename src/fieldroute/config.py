"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FIELDROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Field Route Optimizer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root log level applied by the API entry point.")
    average_speed_kmh: float = Field(
        default=45.0,
        gt=0.0,
        description="Assumed average city-driving speed used for travel time estimates.",
    )
    default_service_minutes: float = Field(
        default=30.0,
        ge=0.0,
        description="On-site service duration used when a stop does not specify one.",
    )
    cost_per_km: float = Field(default=0.15, ge=0.0, description="Fuel cost estimate per kilometre.")
    baseline_km_per_stop: float = Field(
        default=5.0,
        ge=0.0,
        description="Fixed per-stop distance baseline used for the efficiency score.",
    )
    improver_max_passes: int = Field(default=1000, ge=1)
    improver_time_limit_seconds: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="Wall-clock budget for 2-opt improvement; unlimited when unset.",
    )
    efficiency_warning_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    workday_minutes: float = Field(default=480.0, gt=0.0)
    time_window_reference: str = Field(
        default="09:00",
        description="Clock reading every time window is checked against in reference mode.",
    )
    time_window_check_mode: Literal["reference", "arrival"] = Field(
        default="reference",
        description="Check windows against a fixed clock reading or each stop's projected arrival.",
    )
    day_start: str = Field(default="08:00", description="Start-of-day clock used for projected arrivals.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("time_window_reference", "day_start")
    @classmethod
    def _validate_clock(cls, value: str) -> str:
        hours, _, minutes = value.strip().partition(":")
        if not (hours.isdigit() and minutes.isdigit()) or int(hours) > 23 or int(minutes) > 59:
            raise ValueError(f"Expected an HH:MM clock value, got '{value}'.")
        return value.strip()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
