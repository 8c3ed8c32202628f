"""Pydantic schemas for the Web API.

Serialization models for tutorials, deletions, errors and health.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, StrictBool


# =============================================================================
# TUTORIAL SCHEMAS
# =============================================================================


class TutorialCreate(BaseModel):
    """Request body for creating a tutorial."""

    title: str | None = None
    description: str | None = None
    published: StrictBool | None = None


class TutorialUpdate(BaseModel):
    """Request body for a partial update. Only supplied fields are applied."""

    title: str | None = None
    description: str | None = None
    published: StrictBool | None = None

    model_config = {"extra": "ignore"}


class TutorialResponse(BaseModel):
    """Response for a tutorial."""

    id: str
    title: str
    description: str
    published: bool
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}


class DeleteResponse(BaseModel):
    """Response for a single deletion."""

    message: str
    id: str


class DeleteAllResponse(BaseModel):
    """Response for deleting every tutorial."""

    message: str
    deleted_count: int


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str


# =============================================================================
# HEALTH SCHEMAS
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    database: str = "ok"
