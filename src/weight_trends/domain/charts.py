"""Chart geometry and summary models."""

from dataclasses import dataclass, field
from datetime import date

from weight_trends.domain.weights import TimeWindow, WeightLogEntry


@dataclass(frozen=True)
class Padding:
    """Space reserved around the plot area for axis labels."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class Viewport:
    """Plotting surface size in pixels.

    Negative dimensions, or padding that does not fit inside the surface, are
    caller errors and raise ``ValueError``.
    """

    width: float
    height: float
    padding: Padding = field(default_factory=Padding)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Viewport dimensions must be non-negative: {self.width}x{self.height}"
            )
        sides = (
            self.padding.top,
            self.padding.right,
            self.padding.bottom,
            self.padding.left,
        )
        if any(side < 0 for side in sides):
            raise ValueError(f"Viewport padding must be non-negative: {self.padding}")
        if self.inner_width < 0 or self.inner_height < 0:
            raise ValueError("Viewport padding exceeds the viewport size")

    @property
    def inner_width(self) -> float:
        return self.width - self.padding.left - self.padding.right

    @property
    def inner_height(self) -> float:
        return self.height - self.padding.top - self.padding.bottom

    @property
    def baseline_y(self) -> float:
        """Y coordinate of the bottom edge of the plot area."""
        return self.height - self.padding.bottom


@dataclass(frozen=True)
class ValueRange:
    """Weight range mapped onto the vertical extent of the plot area."""

    min_weight: float
    max_weight: float

    @property
    def span(self) -> float:
        return self.max_weight - self.min_weight

    def contains(self, weight_kg: float) -> bool:
        return self.min_weight <= weight_kg <= self.max_weight


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class QuadSegment:
    """Quadratic curve segment from the previous end point to ``end``."""

    control: Point
    end: Point


@dataclass(frozen=True)
class SmoothPath:
    """Smoothed line through plotted points, expressed as quadratic segments."""

    start: Point | None = None
    segments: tuple[QuadSegment, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.start is None or not self.segments

    def to_svg(self) -> str:
        """Render as an SVG path ``d`` attribute, or an empty string."""
        if self.is_empty or self.start is None:
            return ""
        parts = [f"M {_fmt(self.start.x)} {_fmt(self.start.y)}"]
        for segment in self.segments:
            parts.append(
                f"Q {_fmt(segment.control.x)} {_fmt(segment.control.y)} "
                f"{_fmt(segment.end.x)} {_fmt(segment.end.y)}"
            )
        return " ".join(parts)

    @property
    def end(self) -> Point | None:
        if self.segments:
            return self.segments[-1].end
        return self.start


@dataclass(frozen=True)
class AreaFill:
    """Region under the smoothed path, closed along the plot's bottom edge."""

    path: SmoothPath
    baseline_y: float

    def to_svg(self) -> str:
        line = self.path.to_svg()
        start = self.path.start
        end = self.path.end
        if not line or start is None or end is None:
            return ""
        base = _fmt(self.baseline_y)
        return f"{line} L {_fmt(end.x)} {base} L {_fmt(start.x)} {base} Z"


@dataclass(frozen=True)
class PlottedPoint:
    """A weight log entry with its plot coordinates."""

    entry: WeightLogEntry
    x: float
    y: float


@dataclass(frozen=True)
class Statistics:
    """Summary statistics over a filtered weight series."""

    average: float
    min: float
    max: float
    start_weight: float
    end_weight: float
    total_change: float
    weekly_rate: float
    progress_to_goal: float
    sample_count: int = 0

    @property
    def insufficient_data(self) -> bool:
        return self.sample_count < 2

    @classmethod
    def empty(cls) -> "Statistics":
        """Return all-zero statistics for an empty series."""
        return cls(
            average=0.0,
            min=0.0,
            max=0.0,
            start_weight=0.0,
            end_weight=0.0,
            total_change=0.0,
            weekly_rate=0.0,
            progress_to_goal=0.0,
            sample_count=0,
        )


@dataclass(frozen=True)
class YAxisTick:
    value: float
    y: float


@dataclass(frozen=True)
class XAxisTick:
    date: date
    x: float
    index: int


@dataclass(frozen=True)
class ChartModel:
    """Renderer-agnostic weight chart for one window selection."""

    window: TimeWindow
    series: tuple[PlottedPoint, ...]
    statistics: Statistics
    path: SmoothPath
    area: AreaFill | None
    value_range: ValueRange | None
    y_ticks: tuple[YAxisTick, ...]
    x_ticks: tuple[XAxisTick, ...]
    goal_line_y: float | None
    no_data: bool
    insufficient_data: bool
    invalid_entry_count: int = 0


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")
