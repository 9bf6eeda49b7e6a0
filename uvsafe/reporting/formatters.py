"""Output formatters for UV reports."""

import json
from typing import Any

from uvsafe.models.forecast import ForecastView
from uvsafe.models.uv import UvReport


def format_report_text(r: UvReport) -> str:
    """Plain text report for the terminal."""
    s = r.snapshot
    where = r.location_label or f"{r.lat:.4f}, {r.lng:.4f}"
    lines = [
        f"=== UV Report | {where} ===",
        f"Current UV: {s.uv:.1f} ({r.protection.level})",
        f"Max UV today: {s.uv_max:.1f} at {s.uv_max_time or '--:--'}",
    ]
    if s.sun_times is not None:
        lines.append(
            f"Sunrise: {s.sun_times.sunrise or '--'} | "
            f"Solar noon: {s.sun_times.solar_noon or '--'} | "
            f"Sunset: {s.sun_times.sunset or '--'}"
        )
    source = "live API data" if r.burn.from_api else "estimate"
    lines.append(
        f"Time to burn (skin type {r.burn.skin_type}): {r.burn.minutes} min ({source})"
    )
    lines.append(f"Protection ({r.protection.level} risk):")
    for rec in r.protection.recommendations:
        marker = "*" if rec.required else "-"
        lines.append(f"  {marker} {rec.text}")

    lines.append("Forecast (next 24 hours):")
    if not r.forecast.available:
        lines.append("  Forecast data unavailable")
    else:
        for seg in r.forecast.segments:
            span = f"{seg.points[0].time_label}-{seg.points[-1].time_label}"
            peak = max(p.uv for p in seg.points)
            lines.append(
                f"  {span} {seg.category.value}: {len(seg)} points, peak {peak:.1f}"
            )
    for w in r.warnings:
        lines.append(f"Warning: {w}")
    lines.append(f"Updated: {r.fetched_at}")
    return "\n".join(lines)


def forecast_to_dict(view: ForecastView) -> dict[str, Any]:
    return {
        "available": view.available,
        "points": [
            {"time_label": p.time_label, "uv": p.uv, "timestamp": p.timestamp}
            for p in view.chart
        ],
        "segments": [
            {
                "category": seg.category.value,
                "points": [{"time_label": p.time_label, "uv": p.uv} for p in seg.points],
            }
            for seg in view.segments
        ],
    }


def report_to_dict(r: UvReport) -> dict[str, Any]:
    s = r.snapshot
    sun_times = None
    if s.sun_times is not None:
        sun_times = {
            "sunrise": s.sun_times.sunrise,
            "solar_noon": s.sun_times.solar_noon,
            "sunset": s.sun_times.sunset,
        }
    return {
        "lat": r.lat,
        "lng": r.lng,
        "location": r.location_label,
        "uv": s.uv,
        "uv_time": s.uv_time,
        "uv_max": s.uv_max,
        "uv_max_time": s.uv_max_time,
        "ozone": s.ozone,
        "category": r.category.value,
        "safe_exposure_time": {
            f"st{n}": s.safe_exposure.for_skin_type(n) for n in range(1, 7)
        },
        "sun_times": sun_times,
        "burn": {
            "skin_type": r.burn.skin_type,
            "minutes": r.burn.minutes,
            "from_api": r.burn.from_api,
        },
        "protection": {
            "level": r.protection.level,
            "recommendations": [
                {"item": rec.item, "text": rec.text, "required": rec.required}
                for rec in r.protection.recommendations
            ],
        },
        "forecast": forecast_to_dict(r.forecast),
        "warnings": r.warnings,
        "fetched_at": r.fetched_at,
    }


def format_report_json(r: UvReport) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(report_to_dict(r), indent=2)
