"""Forecast normalizer: turns one loosely-typed forecast record into a ForecastPoint.

Records come straight from the OpenUV forecast array and are treated as
untrusted. Each logical field is looked up through an ordered tuple of
accepted keys; the first key holding a non-null value wins. A record whose
time or UV value cannot be resolved is dropped (``None``), never raised.
"""

import logging
import math
from datetime import UTC, datetime, timedelta
from typing import Any

from uvsafe.models.common import IsoTimestamp, to_canonical_iso
from uvsafe.models.forecast import ForecastPoint, SunPosition

logger = logging.getLogger(__name__)

TIME_KEYS = ("uv_time", "time", "timestamp", "datetime")
UV_KEYS = ("uv", "value", "UV", "uv_index", "uvIndex")
SUN_POSITION_KEYS = ("sun_position", "sunPosition", "sun")
AZIMUTH_KEYS = ("azimuth", "az")
ALTITUDE_KEYS = ("altitude", "alt", "elevation")

# Inclusive lower bounds of the epoch buckets.
MILLIS_THRESHOLD = 1e12
SECONDS_THRESHOLD = 1e9

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def normalize(raw: Any) -> ForecastPoint | None:
    """Validate a raw forecast record. Returns None if it must be dropped."""
    if not isinstance(raw, dict):
        logger.debug("Dropping non-object forecast record: %r", raw)
        return None

    timestamp = resolve_timestamp(first_present(raw, TIME_KEYS))
    if timestamp is None:
        logger.debug("Dropping forecast record with unresolvable time: %r", raw)
        return None

    uv = _coerce_uv(first_present(raw, UV_KEYS))
    if uv is None:
        logger.debug("Dropping forecast record with unusable UV value: %r", raw)
        return None

    return ForecastPoint(
        uv_index=uv,
        timestamp=timestamp,
        sun_position=_resolve_sun_position(raw),
    )


def first_present(record: dict, keys: tuple[str, ...]) -> Any:
    """Return the value of the first key in ``keys`` that is present and not None."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def resolve_timestamp(value: Any) -> IsoTimestamp | None:
    """Resolve an epoch number or ISO-like string to the canonical UTC form."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        dt = _from_epoch(value)
    elif isinstance(value, str):
        dt = _from_string(value)
    else:
        return None

    if dt is None:
        return None
    try:
        return to_canonical_iso(dt)
    except OverflowError:
        return None


def _from_epoch(value: int | float) -> datetime | None:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        if value >= MILLIS_THRESHOLD:
            return _EPOCH + timedelta(milliseconds=value)
        if value >= SECONDS_THRESHOLD:
            return _EPOCH + timedelta(seconds=value)
    except OverflowError:
        return None
    return None


def _from_string(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    # Second attempt forces UTC on strings that only parse with an explicit zone.
    for candidate in (text, text + "Z"):
        try:
            dt = datetime.fromisoformat(candidate)
        except ValueError:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt
    return None


def _to_finite_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _coerce_uv(value: Any) -> float | None:
    number = _to_finite_float(value)
    if number is None or number < 0:
        return None
    return number


def _resolve_sun_position(raw: dict) -> SunPosition | None:
    nested = first_present(raw, SUN_POSITION_KEYS)
    if not isinstance(nested, dict):
        return None
    azimuth = _to_finite_float(first_present(nested, AZIMUTH_KEYS))
    altitude = _to_finite_float(first_present(nested, ALTITUDE_KEYS))
    if azimuth is None or altitude is None:
        return None
    return SunPosition(azimuth=azimuth, altitude=altitude)
