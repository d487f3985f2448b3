"""ASGI entrypoint for the macro goals API."""

from macro_goals.api.app import create_app
from macro_goals.containers import build_container

app = create_app(build_container())
