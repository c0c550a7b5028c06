"""Time window selection over a weight log history."""

import logging
import math
from collections.abc import Iterable
from datetime import date, timedelta

from weight_trends.domain.weights import TimeWindow, WeightLogEntry

_logger = logging.getLogger(__name__)


def is_valid_weight(value: float | None) -> bool:
    """Return True for a finite, strictly positive weight."""
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def partition_valid(
    history: Iterable[WeightLogEntry],
) -> tuple[list[WeightLogEntry], int]:
    """Split out entries with unusable weights, returning (valid, dropped count)."""
    valid: list[WeightLogEntry] = []
    dropped = 0
    for entry in history:
        if is_valid_weight(entry.weight_kg):
            valid.append(entry)
        else:
            dropped += 1
    if dropped:
        _logger.debug("Dropped %s weight log entries with invalid weight", dropped)
    return valid, dropped


def filter_history(
    history: Iterable[WeightLogEntry], window: TimeWindow, today: date
) -> list[WeightLogEntry]:
    """Return valid entries inside the window, sorted by date ascending."""
    valid, _ = partition_valid(history)
    return select_window(valid, window, today)


def select_window(
    valid: list[WeightLogEntry], window: TimeWindow, today: date
) -> list[WeightLogEntry]:
    """Sort already-validated entries and apply the window cutoff."""
    ordered = sorted(valid, key=lambda entry: entry.date)
    days = window.days
    if days is None:
        return ordered
    cutoff = today - timedelta(days=days)
    return [entry for entry in ordered if entry.date >= cutoff]
