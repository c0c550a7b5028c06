"""Supabase repository for weight logs."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from weight_trends.adapters.parsing import parse_weight
from weight_trends.domain.weights import WeightLogEntry
from weight_trends.services.weight_trends import WeightLogRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseWeightLogRepository(WeightLogRepository):
    """Supabase implementation for reading weight logs."""

    client: Client

    def list_weight_logs(self, user_id: UUID) -> list[WeightLogEntry]:
        """Return every weight log for a user."""
        response = (
            self.client.table("weight_logs")
            .select("id, date, weight_kg, notes")
            .eq("user_id", str(user_id))
            .order("date", desc=False)
            .execute()
        )
        entries: list[WeightLogEntry] = []
        for row in response.data or []:
            entry = _parse_row(row)
            if entry is None:
                _logger.warning(
                    "Skipping weight log without a valid date: id=%s", row.get("id")
                )
                continue
            entries.append(entry)
        return entries


def _parse_row(row: dict[str, object]) -> WeightLogEntry | None:
    raw_date = row.get("date")
    if not isinstance(raw_date, str) or not raw_date:
        return None
    try:
        logged_on = date.fromisoformat(raw_date[:10])
    except ValueError:
        return None
    notes = row.get("notes")
    return WeightLogEntry(
        id=str(row.get("id", "")),
        date=logged_on,
        weight_kg=parse_weight(row.get("weight_kg")),
        notes=notes if isinstance(notes, str) and notes else None,
    )
