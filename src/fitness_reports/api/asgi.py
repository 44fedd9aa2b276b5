"""ASGI entrypoint for the fitness reports API."""

from fitness_reports.api.app import create_app
from fitness_reports.containers import build_container

app = create_app(build_container())
