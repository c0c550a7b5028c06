"""Axis tick placement for the weight chart."""

from collections.abc import Sequence

from weight_trends.domain.charts import ValueRange, Viewport, XAxisTick, YAxisTick
from weight_trends.domain.weights import WeightLogEntry
from weight_trends.services.curve import x_for_index

Y_TICK_COUNT = 5
MAX_X_TICKS = 5


def build_y_ticks(value_range: ValueRange, viewport: Viewport) -> list[YAxisTick]:
    """Evenly spaced weight ticks from the bottom to the top of the range."""
    last = Y_TICK_COUNT - 1
    return [
        YAxisTick(
            value=value_range.min_weight + value_range.span * i / last,
            y=viewport.padding.top
            + viewport.inner_height
            - i / last * viewport.inner_height,
        )
        for i in range(Y_TICK_COUNT)
    ]


def build_x_ticks(
    filtered: Sequence[WeightLogEntry], viewport: Viewport
) -> list[XAxisTick]:
    """Up to five date ticks spread evenly by series position."""
    count = len(filtered)
    tick_count = min(MAX_X_TICKS, count)
    ticks: list[XAxisTick] = []
    for i in range(tick_count):
        index = 0 if tick_count == 1 else i * (count - 1) // (tick_count - 1)
        ticks.append(
            XAxisTick(
                date=filtered[index].date,
                x=x_for_index(index, count, viewport),
                index=index,
            )
        )
    return ticks


def build_axis_labels(
    filtered: Sequence[WeightLogEntry],
    viewport: Viewport,
    value_range: ValueRange | None,
) -> tuple[list[YAxisTick], list[XAxisTick]]:
    """Return (y_ticks, x_ticks); both empty when there is nothing to plot."""
    if value_range is None or not filtered:
        return [], []
    return build_y_ticks(value_range, viewport), build_x_ticks(filtered, viewport)
