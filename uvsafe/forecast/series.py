"""Series builder: normalize, sort, window and label raw forecast records."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from uvsafe.forecast.normalizer import normalize
from uvsafe.forecast.segments import segment_series
from uvsafe.models.forecast import ChartPoint, ForecastPoint, ForecastSeries, ForecastView

logger = logging.getLogger(__name__)

FORECAST_WINDOW = 24
DEFAULT_TIMEZONE = "UTC"
DEFAULT_TIME_FORMAT = "%I:%M %p"


def build_series(raws: Any) -> ForecastSeries:
    """Normalize every raw record, drop the invalid ones and sort by time.

    The sort is stable, so points sharing a timestamp keep their input order.
    Anything other than a list or tuple is treated as no forecast at all.
    """
    if not isinstance(raws, (list, tuple)):
        return ()

    points = [p for p in (normalize(raw) for raw in raws) if p is not None]
    dropped = len(raws) - len(points)
    if dropped:
        logger.debug("Dropped %d of %d forecast records", dropped, len(raws))

    # Canonical timestamps share one format, so lexical order is time order.
    points.sort(key=lambda p: p.timestamp)
    return tuple(points)


def forecast_window(series: Sequence[ForecastPoint], size: int = FORECAST_WINDOW) -> ForecastSeries:
    """The first ``size`` points of an already sorted series.

    This is a fixed count, not a wall-clock filter: the upstream forecast is
    assumed to start at or after the current hour.
    """
    if size <= 0:
        return ()
    return tuple(series[:size])


def extract_raw_forecast(envelope: Any) -> list:
    """Find the forecast array in an API envelope.

    Checks top-level ``forecast`` first, then ``result.forecast``. Returns
    an empty list when neither is a list.
    """
    if not isinstance(envelope, dict):
        return []
    top_level = envelope.get("forecast")
    if isinstance(top_level, list):
        return top_level
    result = envelope.get("result")
    if isinstance(result, dict) and isinstance(result.get("forecast"), list):
        return result["forecast"]
    return []


def to_chart_points(
    window: Iterable[ForecastPoint],
    tz: str = DEFAULT_TIMEZONE,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> tuple[ChartPoint, ...]:
    """Attach a local time label to each point for the trend chart."""
    zone = ZoneInfo(tz)
    return tuple(
        ChartPoint(
            time_label=format_time_label(p.instant, zone, time_format),
            uv=p.uv_index,
            timestamp=p.timestamp,
        )
        for p in window
    )


def format_time_label(instant: datetime, zone: ZoneInfo, time_format: str) -> str:
    return instant.astimezone(zone).strftime(time_format)


def build_forecast_view(
    envelope: Any,
    window_size: int = FORECAST_WINDOW,
    tz: str = DEFAULT_TIMEZONE,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> ForecastView:
    """Run the whole pipeline on an API envelope.

    Always returns a view; an envelope without a usable forecast gives an
    empty one and the renderer shows its "data unavailable" state.
    """
    raws = extract_raw_forecast(envelope)
    if not raws:
        logger.debug("No forecast array in API response")

    series = build_series(raws)
    window = forecast_window(series, window_size)
    chart = to_chart_points(window, tz, time_format)
    return ForecastView(
        series=series,
        window=window,
        chart=chart,
        segments=tuple(segment_series(chart)),
    )
