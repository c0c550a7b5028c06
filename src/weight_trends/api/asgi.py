"""ASGI entrypoint for the weight trends API."""

from weight_trends.api.app import create_app
from weight_trends.containers import build_container

app = create_app(build_container())
