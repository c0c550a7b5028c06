"""Tests for container wiring and settings."""

from weight_trends.config import Settings
from weight_trends.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.weight_trend_service is not None
    viewport = container.weight_trend_service.default_viewport
    assert viewport.width == settings.chart_width
    assert container.weight_trend_service.cache_ttl_seconds == 60


def test_chart_viewport_overrides_size(settings: Settings) -> None:
    viewport = settings.chart_viewport(width=400)

    assert viewport.width == 400
    assert viewport.height == settings.chart_height
    assert viewport.padding.left == settings.chart_padding_left
