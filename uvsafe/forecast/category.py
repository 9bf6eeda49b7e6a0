"""UV index severity categories."""

from uvsafe.models.forecast import UvCategory

# Exclusive upper bounds, checked in order.
_THRESHOLDS: tuple[tuple[float, UvCategory], ...] = (
    (3.0, UvCategory.LOW),
    (6.0, UvCategory.MODERATE),
    (8.0, UvCategory.HIGH),
    (11.0, UvCategory.VERY_HIGH),
)


def uv_category(value: float) -> UvCategory:
    """Classify a UV index value. Anything not below 11 (NaN included) is extreme."""
    for upper, category in _THRESHOLDS:
        if value < upper:
            return category
    return UvCategory.EXTREME
