"""Weight trend service combining stored logs with the chart pipeline."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from weight_trends.domain.charts import ChartModel, Viewport
from weight_trends.domain.weights import (
    ProfileWeights,
    TimeWindow,
    WeightLogChange,
    WeightLogEntry,
)
from weight_trends.services.cache import Cache, InMemoryCache
from weight_trends.services.charts import build_chart_model
from weight_trends.services.time_window import partition_valid

_logger = logging.getLogger(__name__)


class WeightLogRepository(Protocol):
    """Read interface for a user's weight logs."""

    def list_weight_logs(self, user_id: UUID) -> list[WeightLogEntry]:
        """Return all weight logs for a user, in any order."""


class ProfileRepository(Protocol):
    """Read interface for profile weights."""

    def get_profile_weights(self, user_id: UUID) -> ProfileWeights:
        """Return the user's current and target weights."""


@dataclass
class WeightTrendService:
    """Builds weight charts for users, memoizing recent results."""

    weight_log_repository: WeightLogRepository
    profile_repository: ProfileRepository
    default_viewport: Viewport
    cache: Cache = field(default_factory=InMemoryCache)
    cache_ttl_seconds: int = 60

    def get_chart(
        self,
        user_id: UUID,
        window: TimeWindow,
        viewport: Viewport | None = None,
        timezone_name: str = "UTC",
    ) -> ChartModel:
        """Return the chart for a user's history in the selected window."""
        resolved_viewport = viewport or self.default_viewport
        history = self.weight_log_repository.list_weight_logs(user_id)
        profile = self.profile_repository.get_profile_weights(user_id)
        today = _today(timezone_name)

        cache_key = (
            "weight-chart",
            user_id,
            _fingerprint(history),
            window,
            profile.target_weight_kg,
            profile.current_weight_kg,
            resolved_viewport,
            today,
        )
        cached = self.cache.get(cache_key)
        if isinstance(cached, ChartModel):
            return cached

        chart = build_chart_model(
            history,
            window,
            resolved_viewport,
            today=today,
            target_weight_kg=profile.target_weight_kg,
            current_weight_kg=profile.current_weight_kg,
        )
        if chart.invalid_entry_count:
            _logger.info(
                "Weight chart for user=%s skipped %s invalid entries",
                user_id,
                chart.invalid_entry_count,
            )
        self.cache.set(cache_key, chart, ttl_seconds=self.cache_ttl_seconds)
        return chart

    def recent_changes(self, user_id: UUID, limit: int = 10) -> list[WeightLogChange]:
        """Return the latest logs, newest first, with change from the prior log."""
        history = self.weight_log_repository.list_weight_logs(user_id)
        valid, _ = partition_valid(history)
        newest_first = sorted(valid, key=lambda entry: entry.date, reverse=True)
        changes: list[WeightLogChange] = []
        for index, entry in enumerate(newest_first[:limit]):
            previous = (
                newest_first[index + 1] if index + 1 < len(newest_first) else None
            )
            change = entry.weight_kg - previous.weight_kg if previous else None
            changes.append(WeightLogChange(entry=entry, change_kg=change))
        return changes


def _today(timezone_name: str) -> date:
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def _fingerprint(history: list[WeightLogEntry]) -> int:
    # ordered: same-date entries keep input order through the sort
    return hash(
        tuple(
            (entry.id, entry.date, repr(entry.weight_kg), entry.notes)
            for entry in history
        )
    )
