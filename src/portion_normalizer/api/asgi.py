"""ASGI entrypoint for the portion normalizer API."""

from portion_normalizer.api.app import create_app
from portion_normalizer.containers import build_container

app = create_app(build_container())
