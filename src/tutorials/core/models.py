"""Tutorial record and partial-update helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

# Fields a client may write. id and timestamps are owned by the store.
UPDATABLE_FIELDS = frozenset({"title", "description", "published"})


def utc_now() -> str:
    """Current UTC time as ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Tutorial:
    """A stored tutorial record."""

    id: str
    title: str = ""
    description: str = ""
    published: bool = False
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "published": self.published,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Tutorial:
        """Build from a stored document, exposing ``_id`` as ``id``."""
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title") or "",
            description=doc.get("description") or "",
            published=bool(doc.get("published", False)),
            created_at=doc.get("created_at", ""),
            updated_at=doc.get("updated_at", ""),
        )


def clean_update_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop ``None`` values so an update never nulls a field.

    Unknown keys are kept; stores reject them.
    """
    return {key: value for key, value in fields.items() if value is not None}
