"""Plot coordinates and smoothed path geometry for a weight series."""

from collections.abc import Sequence
from dataclasses import dataclass

from weight_trends.domain.charts import (
    AreaFill,
    PlottedPoint,
    Point,
    QuadSegment,
    SmoothPath,
    ValueRange,
    Viewport,
)
from weight_trends.domain.weights import WeightLogEntry

RANGE_MARGIN_KG = 1.0


@dataclass(frozen=True)
class Curve:
    """Plotted points with the path and area drawn through them."""

    points: tuple[PlottedPoint, ...]
    path: SmoothPath
    area: AreaFill | None
    value_range: ValueRange | None


def value_range_for(
    filtered: Sequence[WeightLogEntry], target_weight_kg: float | None = None
) -> ValueRange | None:
    """Return the padded weight range, widened to include the target if given."""
    if not filtered:
        return None
    weights = [entry.weight_kg for entry in filtered]
    min_weight = min(weights) - RANGE_MARGIN_KG
    max_weight = max(weights) + RANGE_MARGIN_KG
    if target_weight_kg is not None:
        if target_weight_kg < min_weight:
            min_weight = target_weight_kg - RANGE_MARGIN_KG
        elif target_weight_kg > max_weight:
            max_weight = target_weight_kg + RANGE_MARGIN_KG
    return ValueRange(min_weight=min_weight, max_weight=max_weight)


def x_for_index(index: int, count: int, viewport: Viewport) -> float:
    """Map a series position to X; a lone point sits on the left edge."""
    return (
        viewport.padding.left + index / max(1, count - 1) * viewport.inner_width
    )


def y_for_weight(
    weight_kg: float, value_range: ValueRange, viewport: Viewport
) -> float:
    """Map a weight to Y, heavier values higher on screen."""
    span = value_range.span or 1.0
    fraction = (weight_kg - value_range.min_weight) / span
    bottom = viewport.padding.top + viewport.inner_height
    return bottom - fraction * viewport.inner_height


def smooth_path(points: Sequence[Point]) -> SmoothPath:
    """Connect points with two quadratic segments per adjacent pair.

    Each pair meets at the vertical midpoint on the horizontal midpoint
    ``cpx``; the first half uses the previous point's height as control and
    the second half the current point's.
    """
    if len(points) < 2:
        return SmoothPath()
    segments: list[QuadSegment] = []
    for prev, curr in zip(points, points[1:]):
        cpx = (prev.x + curr.x) / 2
        mid = Point(cpx, (prev.y + curr.y) / 2)
        segments.append(QuadSegment(control=Point(cpx, prev.y), end=mid))
        segments.append(QuadSegment(control=Point(cpx, curr.y), end=curr))
    return SmoothPath(start=points[0], segments=tuple(segments))


def build_curve(
    filtered: Sequence[WeightLogEntry],
    viewport: Viewport,
    target_weight_kg: float | None = None,
) -> Curve:
    """Plot a date-sorted series and build its smoothed path and area fill."""
    value_range = value_range_for(filtered, target_weight_kg)
    if value_range is None:
        return Curve(points=(), path=SmoothPath(), area=None, value_range=None)

    count = len(filtered)
    plotted = tuple(
        PlottedPoint(
            entry=entry,
            x=x_for_index(index, count, viewport),
            y=y_for_weight(entry.weight_kg, value_range, viewport),
        )
        for index, entry in enumerate(filtered)
    )
    path = smooth_path([Point(point.x, point.y) for point in plotted])
    area = None
    if not path.is_empty:
        area = AreaFill(path=path, baseline_y=viewport.baseline_y)
    return Curve(points=plotted, path=path, area=area, value_range=value_range)
