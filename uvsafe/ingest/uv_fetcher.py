"""UV fetcher: pulls current conditions and forecast into one UvReport."""

import logging

from uvsafe.config.schema import DisplayConfig
from uvsafe.forecast.category import uv_category
from uvsafe.forecast.series import build_forecast_view
from uvsafe.ingest.openuv_client import OpenUvClient
from uvsafe.models.common import utc_now_iso
from uvsafe.models.uv import UvReport
from uvsafe.uv.burn import effective_burn_minutes
from uvsafe.uv.protection import protection_for
from uvsafe.uv.snapshot import parse_snapshot

logger = logging.getLogger(__name__)


class UvFetcher:
    """Builds a fresh report on every call; nothing is cached between calls."""

    def __init__(self, client: OpenUvClient, display: DisplayConfig | None = None):
        self.client = client
        self.display = display or DisplayConfig()

    def fetch(
        self,
        lat: float,
        lng: float,
        alt: float = 0,
        dt: str | None = None,
        skin_type: int | None = None,
        location_label: str | None = None,
    ) -> UvReport:
        """Fetch a report for a coordinate.

        Errors from the current-UV request propagate. A failed forecast
        request only leaves the report without a forecast.
        """
        current = self.client.get_uv(lat, lng, alt=alt, dt=dt)
        warnings: list[str] = []

        forecast = None
        try:
            forecast_body = self.client.get_forecast(lat, lng)
            forecast = forecast_body.get("result") if isinstance(forecast_body, dict) else None
        except Exception:
            logger.exception("Error fetching forecast for %.4f,%.4f", lat, lng)
            warnings.append("forecast unavailable")

        result = current.get("result") if isinstance(current, dict) else None
        envelope = {"success": True, "result": result, "forecast": forecast}
        return build_report(
            envelope,
            lat,
            lng,
            display=self.display,
            skin_type=skin_type,
            location_label=location_label,
            warnings=warnings,
        )


def build_report(
    envelope: dict,
    lat: float,
    lng: float,
    display: DisplayConfig | None = None,
    skin_type: int | None = None,
    location_label: str | None = None,
    warnings: list[str] | None = None,
) -> UvReport:
    """Derive a UvReport from an envelope of the form {"result": ..., "forecast": ...}."""
    display = display or DisplayConfig()
    skin = skin_type if skin_type is not None else display.default_skin_type

    snapshot = parse_snapshot(envelope.get("result"))
    view = build_forecast_view(
        envelope,
        window_size=display.forecast_window,
        tz=display.timezone,
        time_format=display.time_format,
    )
    if not view.available:
        logger.info("No forecast points for %.4f,%.4f", lat, lng)

    return UvReport(
        lat=lat,
        lng=lng,
        snapshot=snapshot,
        category=uv_category(snapshot.uv),
        protection=protection_for(snapshot.uv),
        burn=effective_burn_minutes(skin, snapshot.uv, snapshot.safe_exposure),
        fetched_at=utc_now_iso(),
        forecast=view,
        location_label=location_label,
        warnings=list(warnings or []),
    )
