"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

IsoTimestamp: TypeAlias = str


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def to_canonical_iso(dt: datetime) -> IsoTimestamp:
    """Render an aware datetime as a millisecond-precision UTC string ending in Z.

    All forecast timestamps use this one form so they sort lexically.
    """
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
