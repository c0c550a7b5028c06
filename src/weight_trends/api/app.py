"""FastAPI application factory."""

import logging
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Query, Request

from weight_trends.api.auth import require_api_token
from weight_trends.app_logging import configure_logging
from weight_trends.containers import AppContainer
from weight_trends.domain.charts import ChartModel, PlottedPoint, SmoothPath, Statistics
from weight_trends.domain.weights import TimeWindow, WeightLogChange, WeightLogEntry


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get(
        "/users/{user_id}/weight-trend",
        dependencies=[Depends(require_api_token)],
    )
    async def weight_trend(
        user_id: UUID,
        request: Request,
        window: TimeWindow = TimeWindow.ONE_MONTH,
        width: Annotated[float | None, Query(gt=0)] = None,
        height: Annotated[float | None, Query(gt=0)] = None,
    ) -> dict[str, object]:
        """Return the weight chart for the selected window."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        try:
            viewport = settings.chart_viewport(width=width, height=height)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        chart = state_container.weight_trend_service.get_chart(
            user_id,
            window,
            viewport=viewport,
            timezone_name=settings.default_timezone,
        )
        logger.info(
            "Weight trend: user=%s window=%s points=%s",
            user_id,
            window.value,
            len(chart.series),
        )
        return _chart_payload(chart)

    @app.get(
        "/users/{user_id}/weight-logs/recent",
        dependencies=[Depends(require_api_token)],
    )
    async def recent_weight_logs(
        user_id: UUID,
        request: Request,
        limit: Annotated[int, Query(ge=1, le=100)] = 10,
    ) -> dict[str, object]:
        """Return the latest weight logs with change from the prior entry."""
        state_container: AppContainer = request.app.state.container
        changes = state_container.weight_trend_service.recent_changes(user_id, limit)
        return {"logs": [_change_payload(change) for change in changes]}

    return app


def format_tick_date(value: date) -> str:
    """Short month/day label used for X axis ticks, e.g. ``Mar 7``."""
    return f"{value:%b} {value.day}"


def _chart_payload(chart: ChartModel) -> dict[str, object]:
    value_range = chart.value_range
    return {
        "window": chart.window.value,
        "no_data": chart.no_data,
        "insufficient_data": chart.insufficient_data,
        "invalid_entry_count": chart.invalid_entry_count,
        "statistics": _statistics_payload(chart.statistics),
        "series": [_point_payload(point) for point in chart.series],
        "path": chart.path.to_svg(),
        "segments": _segments_payload(chart.path),
        "area": chart.area.to_svg() if chart.area else None,
        "value_range": (
            {"min": value_range.min_weight, "max": value_range.max_weight}
            if value_range
            else None
        ),
        "y_ticks": [{"value": tick.value, "y": tick.y} for tick in chart.y_ticks],
        "x_ticks": [
            {
                "date": tick.date.isoformat(),
                "label": format_tick_date(tick.date),
                "x": tick.x,
            }
            for tick in chart.x_ticks
        ],
        "goal_line_y": chart.goal_line_y,
    }


def _statistics_payload(statistics: Statistics) -> dict[str, float]:
    return {
        "average": statistics.average,
        "min": statistics.min,
        "max": statistics.max,
        "start_weight": statistics.start_weight,
        "end_weight": statistics.end_weight,
        "total_change": statistics.total_change,
        "weekly_rate": statistics.weekly_rate,
        "progress_to_goal": statistics.progress_to_goal,
    }


def _segments_payload(path: SmoothPath) -> list[dict[str, float]]:
    return [
        {
            "cx": segment.control.x,
            "cy": segment.control.y,
            "x": segment.end.x,
            "y": segment.end.y,
        }
        for segment in path.segments
    ]


def _entry_payload(entry: WeightLogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.date.isoformat(),
        "weight_kg": entry.weight_kg,
        "notes": entry.notes,
    }


def _point_payload(point: PlottedPoint) -> dict[str, object]:
    return {**_entry_payload(point.entry), "x": point.x, "y": point.y}


def _change_payload(change: WeightLogChange) -> dict[str, object]:
    return {**_entry_payload(change.entry), "change_kg": change.change_kg}
