"""Row value helpers shared by Supabase adapters."""

import math


def parse_weight(value: object) -> float:
    """Coerce a stored weight to float; missing or unparsable values become NaN."""
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def parse_optional_weight(value: object) -> float | None:
    """Coerce a profile weight, returning None when unset or unusable."""
    weight = parse_weight(value)
    if not math.isfinite(weight) or weight <= 0:
        return None
    return weight
