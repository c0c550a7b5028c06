"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from weight_trends.domain.charts import Padding, Viewport

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    environment: str = _ENVIRONMENT
    default_timezone: str = "UTC"
    chart_width: float = 342
    chart_height: float = 180
    chart_padding_top: float = 20
    chart_padding_right: float = 10
    chart_padding_bottom: float = 30
    chart_padding_left: float = 45
    chart_cache_ttl_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def chart_viewport(
        self, width: float | None = None, height: float | None = None
    ) -> Viewport:
        """Return the configured chart viewport, optionally resized."""
        return Viewport(
            width=self.chart_width if width is None else width,
            height=self.chart_height if height is None else height,
            padding=Padding(
                top=self.chart_padding_top,
                right=self.chart_padding_right,
                bottom=self.chart_padding_bottom,
                left=self.chart_padding_left,
            ),
        )
