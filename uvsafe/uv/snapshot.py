"""Extract current UV conditions from an OpenUV ``result`` object."""

import logging
import math
from typing import Any

from uvsafe.models.uv import SafeExposure, SunTimes, UvSnapshot

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """The OpenUV result has no usable current UV value."""


def parse_snapshot(result: Any) -> UvSnapshot:
    """Build a UvSnapshot, tolerating missing optional pieces.

    Raises:
        SnapshotError: if ``result`` is not an object or ``uv`` is not a number.
    """
    if not isinstance(result, dict):
        raise SnapshotError(f"Expected object for UV result, got: {type(result).__name__}")

    uv = _number(result.get("uv"))
    if uv is None:
        raise SnapshotError(f"Missing or non-numeric 'uv' in result: {result.get('uv')!r}")

    uv_max = _number(result.get("uv_max"))
    return UvSnapshot(
        uv=uv,
        uv_time=str(result.get("uv_time") or ""),
        uv_max=uv if uv_max is None else uv_max,
        uv_max_time=str(result.get("uv_max_time") or ""),
        ozone=_number(result.get("ozone")),
        safe_exposure=_parse_safe_exposure(result.get("safe_exposure_time")),
        sun_times=_parse_sun_times(result.get("sun_info")),
    )


def _number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_safe_exposure(raw: Any) -> SafeExposure:
    if not isinstance(raw, dict):
        return SafeExposure()
    return SafeExposure(**{f"st{n}": _number(raw.get(f"st{n}")) for n in range(1, 7)})


def _parse_sun_times(raw: Any) -> SunTimes | None:
    if not isinstance(raw, dict):
        return None
    times = raw.get("sun_times")
    if not isinstance(times, dict):
        logger.debug("sun_info present without sun_times")
        return None
    return SunTimes(
        sunrise=times.get("sunrise"),
        solar_noon=times.get("solarNoon"),
        sunset=times.get("sunset"),
    )
