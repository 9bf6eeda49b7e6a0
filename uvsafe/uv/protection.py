"""Sun protection advice for each UV severity category."""

from uvsafe.forecast.category import uv_category
from uvsafe.models.forecast import UvCategory
from uvsafe.models.uv import Protection, Recommendation

LEVEL_LABELS: dict[UvCategory, str] = {
    UvCategory.LOW: "Low",
    UvCategory.MODERATE: "Moderate",
    UvCategory.HIGH: "High",
    UvCategory.VERY_HIGH: "Very High",
    UvCategory.EXTREME: "Extreme",
}

_ADVICE: dict[UvCategory, tuple[Recommendation, ...]] = {
    UvCategory.LOW: (
        Recommendation("sunglasses", "Sunglasses optional", False),
        Recommendation("sunscreen", "SPF 15+ if sensitive skin", False),
        Recommendation("hat", "Hat optional", False),
        Recommendation("shade", "No shade needed", False),
    ),
    UvCategory.MODERATE: (
        Recommendation("sunglasses", "Wear sunglasses", True),
        Recommendation("sunscreen", "Apply SPF 30+ sunscreen", True),
        Recommendation("hat", "Wear a hat", True),
        Recommendation("shade", "Seek shade during midday", False),
    ),
    UvCategory.HIGH: (
        Recommendation("sunglasses", "UV-blocking sunglasses essential", True),
        Recommendation("sunscreen", "Apply SPF 50+ every 2 hours", True),
        Recommendation("hat", "Wide-brim hat required", True),
        Recommendation("shade", "Stay in shade 10am-4pm", True),
    ),
    UvCategory.VERY_HIGH: (
        Recommendation("sunglasses", "Maximum UV protection eyewear", True),
        Recommendation("sunscreen", "SPF 50+ reapply every 90 mins", True),
        Recommendation("hat", "Wide-brim hat + neck cover", True),
        Recommendation("shade", "Avoid sun 10am-4pm", True),
    ),
    UvCategory.EXTREME: (
        Recommendation("sunglasses", "Maximum UV protection eyewear", True),
        Recommendation("sunscreen", "SPF 50+ every hour", True),
        Recommendation("hat", "Full coverage headwear", True),
        Recommendation("shade", "Stay indoors if possible", True),
    ),
}


def protection_for(uv: float) -> Protection:
    category = uv_category(uv)
    return Protection(
        category=category,
        level=LEVEL_LABELS[category],
        recommendations=_ADVICE[category],
    )
