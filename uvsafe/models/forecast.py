"""UV forecast data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from uvsafe.models.common import IsoTimestamp


class UvCategory(StrEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "veryHigh"
    EXTREME = "extreme"


@dataclass(frozen=True)
class SunPosition:
    azimuth: float
    altitude: float


@dataclass(frozen=True)
class ForecastPoint:
    uv_index: float
    timestamp: IsoTimestamp  # canonical UTC, e.g. 2026-02-11T01:00:00.000Z
    sun_position: SunPosition | None = None

    @property
    def instant(self) -> datetime:
        return datetime.fromisoformat(self.timestamp)


ForecastSeries = tuple[ForecastPoint, ...]


@dataclass(frozen=True)
class ChartPoint:
    time_label: str
    uv: float
    timestamp: IsoTimestamp


@dataclass(frozen=True)
class Segment:
    category: UvCategory
    points: tuple[ChartPoint, ...]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class ForecastView:
    """Everything the renderer needs to draw the forecast trend."""

    series: ForecastSeries
    window: ForecastSeries
    chart: tuple[ChartPoint, ...]
    segments: tuple[Segment, ...]

    @property
    def available(self) -> bool:
        return len(self.window) > 0


EMPTY_FORECAST_VIEW = ForecastView(series=(), window=(), chart=(), segments=())
