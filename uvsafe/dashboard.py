"""UV dashboard: FastAPI backend serving current UV, forecast trend and burn time."""

import logging
import os

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from uvsafe.config.loader import load_config
from uvsafe.config.schema import AppConfig
from uvsafe.ingest.openuv_client import OpenUvAuthError, OpenUvClient, OpenUvError
from uvsafe.ingest.uv_fetcher import UvFetcher
from uvsafe.locations import (
    InvalidCoordinatesError,
    location_label,
    nearest_location,
    search_locations,
    validate_coordinates,
)
from uvsafe.models.common import utc_now_iso
from uvsafe.reporting.formatters import report_to_dict
from uvsafe.uv.burn import SKIN_TYPES, burn_warning_level, time_to_burn_minutes
from uvsafe.uv.snapshot import SnapshotError

logger = logging.getLogger(__name__)

CONFIG_ENV = "UVSAFE_CONFIG"

app = FastAPI(title="UV-Safe Dashboard", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_config() -> AppConfig:
    return load_config(os.environ.get(CONFIG_ENV))


def get_fetcher(config: AppConfig = Depends(get_config)) -> UvFetcher:
    client = OpenUvClient(
        api_key=config.openuv.api_key,
        base_url=config.openuv.base_url,
        timeout=config.openuv.timeout_seconds,
        max_retries=config.openuv.max_retries,
        retry_base_delay=config.openuv.retry_base_delay,
    )
    return UvFetcher(client, config.display)


# ── Data endpoints ──────────────────────────────────────────────


@app.get("/api/uv")
def get_uv(
    lat: float | None = None,
    lng: float | None = None,
    alt: float = 0,
    dt: str = "",
    skin_type: int | None = Query(default=None, ge=1, le=6),
    fetcher: UvFetcher = Depends(get_fetcher),
    config: AppConfig = Depends(get_config),
):
    """Current UV, burn time, protection advice and the 24 hour forecast trend."""
    if lat is None or lng is None:
        raise HTTPException(400, "Missing required parameters: lat and lng")
    try:
        validate_coordinates(lat, lng)
    except InvalidCoordinatesError as e:
        raise HTTPException(400, str(e)) from e

    label = location_label(nearest_location(lat, lng, config.locations))
    try:
        report = fetcher.fetch(
            lat, lng, alt=alt, dt=dt or None, skin_type=skin_type, location_label=label
        )
    except OpenUvAuthError as e:
        raise HTTPException(403, str(e)) from e
    except OpenUvError as e:
        raise HTTPException(e.status_code or 502, str(e)) from e
    except SnapshotError as e:
        logger.error("Unusable UV result for %.4f,%.4f: %s", lat, lng, e)
        raise HTTPException(502, "Malformed UV data from provider") from e
    except httpx.HTTPError as e:
        logger.error("Error fetching UV data: %s", e)
        raise HTTPException(500, "Failed to fetch UV data") from e

    return {"success": True, "result": report_to_dict(report)}


@app.get("/api/locations")
def get_locations(
    q: str = "",
    lat: float | None = None,
    lon: float | None = None,
    config: AppConfig = Depends(get_config),
):
    """Preset locations matching ``q``, or the nearest preset to lat/lon."""
    if lat is not None and lon is not None:
        try:
            validate_coordinates(lat, lon)
        except InvalidCoordinatesError as e:
            raise HTTPException(400, str(e)) from e
        nearest = nearest_location(lat, lon, config.locations)
        matches = [nearest.model_copy(update={"lat": lat, "lon": lon})]
    else:
        matches = search_locations(q, config.locations)
    return [
        {**loc.model_dump(), "label": location_label(loc)}
        for loc in matches
    ]


@app.get("/api/burn")
def get_burn(
    uv: float = Query(ge=0),
    skin_type: int = Query(default=3, ge=1, le=6),
    seconds_remaining: float | None = Query(default=None, ge=0),
):
    """Offline time-to-burn calculation from a UV index."""
    minutes = time_to_burn_minutes(skin_type, uv)
    body = {"skin_type": skin_type, "uv": uv, "minutes": minutes}
    if seconds_remaining is not None:
        body["warning_level"] = burn_warning_level(seconds_remaining, minutes).value
    return body


@app.get("/api/skin-types")
def get_skin_types():
    return [
        {
            "type": s.type,
            "name": s.name,
            "description": s.description,
            "burn_behaviour": s.burn_behaviour,
        }
        for s in SKIN_TYPES
    ]


@app.get("/health")
def health():
    return {"status": "ok", "timestamp": utc_now_iso()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
