"""Split a chart series into contiguous runs of one UV severity category.

Each run is closed at the first point whose category differs, and that
boundary point is kept in the closing run so a multi-colour line drawn from
the segments has no gaps. Single-point runs are never emitted on their own
unless the whole series is one point.
"""

from collections.abc import Sequence

from uvsafe.forecast.category import uv_category
from uvsafe.models.forecast import ChartPoint, Segment, UvCategory


def segment_series(points: Sequence[ChartPoint]) -> list[Segment]:
    """Segment a windowed chart series by UV category.

    Concatenating the points of the returned segments, in order, gives back
    ``points`` exactly.
    """
    if not points:
        return []

    segments: list[Segment] = []
    n = len(points)
    start = 0
    current = uv_category(points[0].uv)
    i = 1
    while i < n:
        category = uv_category(points[i].uv)
        if category != current:
            end = i + 1
            if end - start == 1 and not segments and end < n:
                # Nothing to merge into yet: absorb the following point.
                # Currently unreachable: with no segments, start is 0 and i >= 1,
                # so the closing run already holds two points.
                end += 1
                i += 1
            _push(segments, current, points[start:end])
            start = end
            current = uv_category(points[i].uv)
        i += 1

    if start < n:
        _push(segments, current, points[start:])
    return segments


def _push(segments: list[Segment], category: UvCategory, run: Sequence[ChartPoint]) -> None:
    """Append a run, folding a single-point run into the previous segment."""
    if len(run) == 1 and segments:
        last = segments[-1]
        segments[-1] = Segment(category=last.category, points=last.points + tuple(run))
        return
    segments.append(Segment(category=category, points=tuple(run)))
