"""ASGI entrypoint for the CookEase API."""

from cookease.api.app import create_app
from cookease.containers import build_container

app = create_app(build_container())
