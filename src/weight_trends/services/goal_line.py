"""Target weight reference line."""

from weight_trends.domain.charts import ValueRange, Viewport
from weight_trends.services.curve import y_for_weight


def goal_line_y(
    target_weight_kg: float | None,
    value_range: ValueRange | None,
    viewport: Viewport,
) -> float | None:
    """Return the plotted Y of the target weight, or None if it is off-chart."""
    if target_weight_kg is None or value_range is None:
        return None
    if not value_range.contains(target_weight_kg):
        return None
    return y_for_weight(target_weight_kg, value_range, viewport)
