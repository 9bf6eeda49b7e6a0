"""Time-to-burn estimates per Fitzpatrick skin type."""

import math

from uvsafe.models.uv import BurnEstimate, SafeExposure, SkinType, WarningLevel

SKIN_TYPES: tuple[SkinType, ...] = (
    SkinType(1, "Type I", "Pale white skin, blue/green eyes, red/blonde hair",
             "Burns easily, never tans", 200),
    SkinType(2, "Type II", "Fair skin, blue eyes",
             "Burns easily, tans minimally", 250),
    SkinType(3, "Type III", "Fair to beige skin",
             "Burns moderately, tans gradually", 350),
    SkinType(4, "Type IV", "Beige to light brown skin",
             "Burns minimally, tans easily", 450),
    SkinType(5, "Type V", "Brown skin",
             "Rarely burns, tans darkly", 600),
    SkinType(6, "Type VI", "Dark brown to black skin",
             "Never burns, deeply pigmented", 1000),
)

DEFAULT_BURN_MINUTES = 60
MIN_BURN_MINUTES = 5


def get_skin_type(skin_type: int) -> SkinType | None:
    for s in SKIN_TYPES:
        if s.type == skin_type:
            return s
    return None


def time_to_burn_minutes(skin_type: int, uv: float) -> int:
    """Minutes to burn = skin constant / UV index, never below 5.

    Returns the 60 minute default for an unknown skin type or a UV of zero.
    """
    skin = get_skin_type(skin_type)
    if skin is None or uv <= 0:
        return DEFAULT_BURN_MINUTES
    return max(MIN_BURN_MINUTES, math.floor(skin.constant / uv))


def effective_burn_minutes(
    skin_type: int, uv: float, safe_exposure: SafeExposure | None = None
) -> BurnEstimate:
    """Prefer the API's safe exposure time for the skin type, else the formula."""
    if safe_exposure is not None:
        api_minutes = safe_exposure.for_skin_type(skin_type)
        if api_minutes is not None and api_minutes > 0:
            return BurnEstimate(skin_type=skin_type, minutes=int(api_minutes), from_api=True)
    return BurnEstimate(
        skin_type=skin_type,
        minutes=time_to_burn_minutes(skin_type, uv),
        from_api=False,
    )


def burn_warning_level(seconds_remaining: float, total_minutes: float) -> WarningLevel:
    """Warning level of a running burn countdown by fraction of time left."""
    total_seconds = total_minutes * 60
    if total_seconds <= 0:
        return WarningLevel.DANGER
    fraction = seconds_remaining / total_seconds
    if fraction > 0.5:
        return WarningLevel.SAFE
    if fraction > 0.25:
        return WarningLevel.WARNING
    return WarningLevel.DANGER
