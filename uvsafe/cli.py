"""CLI entry point for the UV dashboard backend."""

import argparse
import logging
from pathlib import Path

import httpx

from uvsafe.config.loader import find_location, get_config_value, load_config, set_config_value
from uvsafe.config.schema import AppConfig
from uvsafe.ingest.openuv_client import OpenUvClient, OpenUvError
from uvsafe.ingest.uv_fetcher import UvFetcher
from uvsafe.locations import (
    InvalidCoordinatesError,
    location_label,
    nearest_location,
    search_locations,
    validate_coordinates,
)
from uvsafe.reporting.formatters import format_report_json, format_report_text
from uvsafe.uv.burn import SKIN_TYPES, time_to_burn_minutes
from uvsafe.uv.protection import protection_for
from uvsafe.uv.snapshot import SnapshotError
from uvsafe.watch import RefreshLoop

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="uvsafe",
        description="UV index, time-to-burn and forecast trend",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # now / watch share location arguments
    now_p = sub.add_parser("now", help="Fetch and print the current UV report")
    watch_p = sub.add_parser("watch", help="Refresh the UV report on an interval")
    for p in (now_p, watch_p):
        p.add_argument("--city", help="Preset location slug, e.g. melbourne")
        p.add_argument("--lat", type=float, help="Latitude")
        p.add_argument("--lng", type=float, help="Longitude")
        p.add_argument("--skin-type", type=int, choices=range(1, 7), help="Fitzpatrick skin type")
        p.add_argument("--json", action="store_true", help="Print JSON instead of text")
    watch_p.add_argument("--interval", type=_positive_int, help="Seconds between refreshes")

    # locations
    loc_p = sub.add_parser("locations", help="List or search preset locations")
    loc_p.add_argument("query", nargs="?", default="", help="City or state filter")

    # burn
    burn_p = sub.add_parser("burn", help="Time to burn for a UV index")
    burn_p.add_argument("uv", type=float, help="UV index")
    burn_p.add_argument("--skin-type", type=int, choices=range(1, 7), help="Fitzpatrick skin type")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config)
    if not config_path.exists() and args.config == DEFAULT_CONFIG:
        config = load_config()
    else:
        config = load_config(config_path)

    if args.command == "now":
        return _cmd_now(config, args)
    elif args.command == "watch":
        return _cmd_watch(config, args)
    elif args.command == "locations":
        return _cmd_locations(config, args)
    elif args.command == "burn":
        return _cmd_burn(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def _make_fetcher(config: AppConfig) -> UvFetcher:
    client = OpenUvClient(
        api_key=config.openuv.api_key,
        base_url=config.openuv.base_url,
        timeout=config.openuv.timeout_seconds,
        max_retries=config.openuv.max_retries,
        retry_base_delay=config.openuv.retry_base_delay,
    )
    return UvFetcher(client, config.display)


def _resolve_target(config: AppConfig, args) -> tuple[float, float, str]:
    """Pick coordinates from --lat/--lng, --city or the configured default."""
    if args.lat is not None or args.lng is not None:
        if args.lat is None or args.lng is None:
            raise InvalidCoordinatesError("Both --lat and --lng are required")
        validate_coordinates(args.lat, args.lng)
        label = location_label(nearest_location(args.lat, args.lng, config.locations))
        return args.lat, args.lng, label
    loc = find_location(config, args.city or config.default_location)
    return loc.lat, loc.lon, location_label(loc)


def _cmd_now(config: AppConfig, args) -> int:
    try:
        lat, lng, label = _resolve_target(config, args)
    except (InvalidCoordinatesError, KeyError) as e:
        print(f"Error: {e}")
        return 1

    fetcher = _make_fetcher(config)
    try:
        report = fetcher.fetch(lat, lng, skin_type=args.skin_type, location_label=label)
    except (OpenUvError, SnapshotError, httpx.HTTPError) as e:
        print(f"Error: {e}")
        return 1

    print(format_report_json(report) if args.json else format_report_text(report))
    return 0


def _cmd_watch(config: AppConfig, args) -> int:
    try:
        lat, lng, label = _resolve_target(config, args)
    except (InvalidCoordinatesError, KeyError) as e:
        print(f"Error: {e}")
        return 1

    formatter = format_report_json if args.json else format_report_text
    loop = RefreshLoop(
        _make_fetcher(config),
        lat,
        lng,
        interval=args.interval or config.refresh.interval_minutes * 60,
        max_backoff=config.refresh.max_backoff_seconds,
        skin_type=args.skin_type,
        location_label=label,
        on_report=lambda report: print(formatter(report), flush=True),
    )
    loop.install_signal_handlers()
    print(f"Watching {label} every {loop.interval}s (Ctrl-C to stop)")
    loop.run()
    return 0


def _cmd_locations(config: AppConfig, args) -> int:
    matches = search_locations(args.query, config.locations)
    if not matches:
        print(f"No locations match '{args.query}'")
        return 1
    for loc in matches:
        print(f"  {loc.slug:<12} {location_label(loc):<20} {loc.lat:9.4f} {loc.lon:9.4f}")
    return 0


def _cmd_burn(config: AppConfig, args) -> int:
    if args.uv < 0:
        print("Error: UV index must be non-negative")
        return 1
    skin_type = args.skin_type or config.display.default_skin_type
    skin = SKIN_TYPES[skin_type - 1]
    minutes = time_to_burn_minutes(skin_type, args.uv)
    protection = protection_for(args.uv)
    print(f"UV {args.uv:.1f} ({protection.level}) | {skin.name}: {minutes} min to burn")
    for rec in protection.recommendations:
        marker = "*" if rec.required else "-"
        print(f"  {marker} {rec.text}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
