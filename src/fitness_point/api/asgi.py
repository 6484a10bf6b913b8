"""ASGI entrypoint for the FitnessPoint API."""

from fitness_point.api.app import create_app
from fitness_point.containers import build_container

app = create_app(build_container())
