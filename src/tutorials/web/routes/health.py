"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from tutorials import __version__
from tutorials.core.tutorial_store import TutorialStore
from tutorials.web.dependencies import get_store
from tutorials.web.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(store: TutorialStore = Depends(get_store)) -> HealthResponse:
    """Check API and database status."""
    database_ok = await store.ping()
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        database="ok" if database_ok else "unavailable",
    )
