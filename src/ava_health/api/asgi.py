"""ASGI entrypoint for the Ava ingredient API."""

from ava_health.api.app import create_app
from ava_health.containers import build_container

app = create_app(build_container())
