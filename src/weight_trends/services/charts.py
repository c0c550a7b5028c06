"""Chart model assembly."""

import logging
from collections.abc import Iterable
from datetime import date

from weight_trends.domain.charts import ChartModel, SmoothPath, Statistics, Viewport
from weight_trends.domain.weights import TimeWindow, WeightLogEntry
from weight_trends.services.axis_labels import build_axis_labels
from weight_trends.services.curve import build_curve
from weight_trends.services.goal_line import goal_line_y
from weight_trends.services.statistics import aggregate
from weight_trends.services.time_window import (
    is_valid_weight,
    partition_valid,
    select_window,
)

_logger = logging.getLogger(__name__)


def build_chart_model(  # noqa: PLR0913
    history: Iterable[WeightLogEntry],
    window: TimeWindow,
    viewport: Viewport,
    *,
    today: date,
    target_weight_kg: float | None = None,
    current_weight_kg: float | None = None,
) -> ChartModel:
    """Build the chart for a history, window and viewport.

    Empty histories and sparse windows are reported through ``no_data`` and
    ``insufficient_data`` instead of raising.
    """
    target = _optional_weight(target_weight_kg, "target")
    current = _optional_weight(current_weight_kg, "current")

    valid, invalid_count = partition_valid(history)
    if not valid:
        return ChartModel(
            window=window,
            series=(),
            statistics=Statistics.empty(),
            path=SmoothPath(),
            area=None,
            value_range=None,
            y_ticks=(),
            x_ticks=(),
            goal_line_y=None,
            no_data=True,
            insufficient_data=True,
            invalid_entry_count=invalid_count,
        )

    filtered = select_window(valid, window, today)
    statistics = aggregate(filtered, target, current)
    curve = build_curve(filtered, viewport, target)
    y_ticks, x_ticks = build_axis_labels(filtered, viewport, curve.value_range)

    if statistics.insufficient_data:
        _logger.debug(
            "Window %s has %s point(s); path omitted", window.value, len(filtered)
        )

    return ChartModel(
        window=window,
        series=curve.points,
        statistics=statistics,
        path=curve.path,
        area=curve.area,
        value_range=curve.value_range,
        y_ticks=tuple(y_ticks),
        x_ticks=tuple(x_ticks),
        goal_line_y=goal_line_y(target, curve.value_range, viewport),
        no_data=False,
        insufficient_data=statistics.insufficient_data,
        invalid_entry_count=invalid_count,
    )


def _optional_weight(value: float | None, label: str) -> float | None:
    if value is None:
        return None
    if not is_valid_weight(value):
        _logger.warning("Ignoring invalid %s weight: %r", label, value)
        return None
    return value
