"""Current-conditions, burn-time and report models."""

from dataclasses import dataclass, field
from enum import StrEnum

from uvsafe.models.forecast import EMPTY_FORECAST_VIEW, ForecastView, UvCategory


class WarningLevel(StrEnum):
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class SafeExposure:
    """Minutes of safe exposure per Fitzpatrick skin type; None when unknown."""

    st1: float | None = None
    st2: float | None = None
    st3: float | None = None
    st4: float | None = None
    st5: float | None = None
    st6: float | None = None

    def for_skin_type(self, skin_type: int) -> float | None:
        return getattr(self, f"st{skin_type}", None)


@dataclass(frozen=True)
class SunTimes:
    sunrise: str | None = None
    solar_noon: str | None = None
    sunset: str | None = None


@dataclass(frozen=True)
class UvSnapshot:
    uv: float
    uv_time: str
    uv_max: float
    uv_max_time: str
    ozone: float | None = None
    safe_exposure: SafeExposure = SafeExposure()
    sun_times: SunTimes | None = None


@dataclass(frozen=True)
class SkinType:
    type: int
    name: str
    description: str
    burn_behaviour: str
    constant: int


@dataclass(frozen=True)
class BurnEstimate:
    skin_type: int
    minutes: int
    from_api: bool


@dataclass(frozen=True)
class Recommendation:
    item: str  # sunglasses | sunscreen | hat | shade
    text: str
    required: bool


@dataclass(frozen=True)
class Protection:
    category: UvCategory
    level: str
    recommendations: tuple[Recommendation, ...]


@dataclass(frozen=True)
class UvReport:
    lat: float
    lng: float
    snapshot: UvSnapshot
    category: UvCategory
    protection: Protection
    burn: BurnEstimate
    fetched_at: str
    forecast: ForecastView = EMPTY_FORECAST_VIEW
    location_label: str | None = None
    warnings: list[str] = field(default_factory=list)
