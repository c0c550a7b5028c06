"""Summary statistics for a filtered weight series."""

from collections.abc import Sequence

from weight_trends.domain.charts import Statistics
from weight_trends.domain.weights import WeightLogEntry

DAYS_PER_WEEK = 7


def aggregate(
    filtered: Sequence[WeightLogEntry],
    target_weight_kg: float | None = None,
    current_weight_kg: float | None = None,
) -> Statistics:
    """Compute statistics over a date-sorted series.

    ``progress_to_goal`` is the share of the original start-to-target distance
    closed by the latest entry, clamped to [0, 100]. It stays 0 unless both the
    target and current weight are known.
    """
    if not filtered:
        return Statistics.empty()

    weights = [entry.weight_kg for entry in filtered]
    start_weight = weights[0]
    end_weight = weights[-1]
    total_change = end_weight - start_weight

    days_between = max(1, (filtered[-1].date - filtered[0].date).days)
    weekly_rate = total_change * DAYS_PER_WEEK / days_between

    progress = 0.0
    if target_weight_kg is not None and current_weight_kg is not None:
        progress = progress_to_goal(start_weight, end_weight, target_weight_kg)

    return Statistics(
        average=sum(weights) / len(weights),
        min=min(weights),
        max=max(weights),
        start_weight=start_weight,
        end_weight=end_weight,
        total_change=total_change,
        weekly_rate=weekly_rate,
        progress_to_goal=progress,
        sample_count=len(weights),
    )


def progress_to_goal(
    start_weight: float, end_weight: float, target_weight_kg: float
) -> float:
    """Percentage of the start-to-target distance covered, clamped to [0, 100]."""
    total_to_lose = start_weight - target_weight_kg
    if total_to_lose == 0:
        return 0.0
    already_lost = start_weight - end_weight
    return min(100.0, max(0.0, already_lost / total_to_lose * 100))
