"""ASGI entrypoint for the laundry tracker API."""

from laundry_tracker.api.app import create_app
from laundry_tracker.containers import build_container

app = create_app(build_container())
