"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CRIMESPOTTER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "CrimeSpotter UK API"
    version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment. Upstream error details are hidden in production.",
    )
    log_level: str = "INFO"
    api_prefix: str = "/api"

    police_api_base_url: str = Field(
        default="https://data.police.uk/api",
        description="Base URL of the data.police.uk API.",
    )
    police_api_user_agent: str = "CrimeSpotter-UK/1.0"
    dates_timeout_seconds: float = Field(default=10.0, gt=0.0)
    forces_timeout_seconds: float = Field(default=10.0, gt=0.0)
    crimes_timeout_seconds: float = Field(default=15.0, gt=0.0)

    dates_cache_ttl_seconds: float = Field(default=3600.0, gt=0.0)
    fallback_date: str = Field(
        default="2025-06",
        description="Reporting month returned when the dates endpoint is unavailable.",
    )
    warm_dates_cache: bool = Field(default=True, description="Resolve the latest date on startup.")
    dates_list_limit: int = Field(default=12, ge=1)

    default_latitude: str = "51.5074"
    default_longitude: str = "-0.1278"

    canonical_host: Optional[str] = Field(
        default=None,
        description="Host used for absolute sitemap URLs (e.g. www.crimespotter.co.uk).",
    )
    sitemap_hosts: tuple[str, ...] = Field(
        default=("www.crimespotter.co.uk", "crimespotter.co.uk"),
        description="Hosts advertised as sitemap locations in robots.txt.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=("*",),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("police_api_base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("frontend_allowed_origins", "sitemap_hosts", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
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

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
