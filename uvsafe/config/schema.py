"""Pydantic v2 configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    city: str
    state: str
    country: str = "Australia"
    slug: str
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class OpenUvConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openuv.io/api/v1"
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timezone: str = "Australia/Sydney"
    time_format: str = "%I:%M %p"
    forecast_window: int = Field(default=24, ge=1)
    default_skin_type: int = Field(default=3, ge=1, le=6)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


class RefreshConfig(BaseModel):
    model_config = {"extra": "forbid"}

    interval_minutes: int = Field(default=5, ge=1)
    max_backoff_seconds: int = Field(default=1800, ge=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    openuv: OpenUvConfig = OpenUvConfig()
    display: DisplayConfig = DisplayConfig()
    refresh: RefreshConfig = RefreshConfig()
    default_location: str = "sydney"
    locations: list[LocationConfig] = []
