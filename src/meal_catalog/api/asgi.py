"""ASGI entrypoint for the meal catalog API."""

from meal_catalog.api.app import create_app
from meal_catalog.containers import build_container

app = create_app(build_container())
