"""Route handlers for the Web API."""

from tutorials.web.routes.health import router as health_router
from tutorials.web.routes.tutorials import router as tutorials_router

__all__ = [
    "health_router",
    "tutorials_router",
]
