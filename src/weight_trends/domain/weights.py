"""Weight log domain models."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class WeightLogEntry:
    """A single user-recorded body weight measurement."""

    id: str
    date: date
    weight_kg: float
    notes: str | None = None


class TimeWindow(str, Enum):
    """Lookback period selectable on the weight chart."""

    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL = "ALL"

    @property
    def days(self) -> int | None:
        """Day-count threshold, or None when the window has no lower bound."""
        return _WINDOW_DAYS[self]


_WINDOW_DAYS: dict[TimeWindow, int | None] = {
    TimeWindow.ONE_WEEK: 7,
    TimeWindow.ONE_MONTH: 30,
    TimeWindow.THREE_MONTHS: 90,
    TimeWindow.SIX_MONTHS: 180,
    TimeWindow.ONE_YEAR: 365,
    TimeWindow.ALL: None,
}


@dataclass(frozen=True)
class ProfileWeights:
    """Current and target weights from the user's physical profile."""

    current_weight_kg: float | None = None
    target_weight_kg: float | None = None


@dataclass(frozen=True)
class WeightLogChange:
    """A logged weight with its change from the previous measurement."""

    entry: WeightLogEntry
    change_kg: float | None
