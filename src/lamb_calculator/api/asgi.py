"""ASGI entrypoint for the lamb calculator API."""

from lamb_calculator.api.app import create_app
from lamb_calculator.containers import build_container

app = create_app(build_container())
