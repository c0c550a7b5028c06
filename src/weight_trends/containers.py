"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from weight_trends.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from weight_trends.adapters.supabase_weight_log_repository import (
    SupabaseWeightLogRepository,
)
from weight_trends.config import Settings
from weight_trends.services.cache import InMemoryCache
from weight_trends.services.weight_trends import WeightTrendService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    weight_trend_service: WeightTrendService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    weight_trend_service = WeightTrendService(
        weight_log_repository=SupabaseWeightLogRepository(supabase_client),
        profile_repository=SupabaseProfileRepository(supabase_client),
        default_viewport=resolved_settings.chart_viewport(),
        cache=InMemoryCache(),
        cache_ttl_seconds=resolved_settings.chart_cache_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        weight_trend_service=weight_trend_service,
    )
