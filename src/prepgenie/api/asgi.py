"""ASGI entrypoint for the PrepGenie API."""

from prepgenie.api.app import create_app
from prepgenie.containers import build_container

app = create_app(build_container())
