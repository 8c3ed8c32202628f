"""FastAPI dependencies for the Web API."""

from fastapi import Request

from tutorials.core.tutorial_store import TutorialStore


def get_store(request: Request) -> TutorialStore:
    """Return the store handle attached to the app at startup."""
    return request.app.state.store
