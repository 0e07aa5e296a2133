"""Shared FastAPI dependencies."""

from fastapi import Request

from epl_backend.app.core.state import AppState


def get_app_state(request: Request) -> AppState:
    """Return the ``AppState`` that ``create_app`` attached to the app."""
    return request.app.state.records
