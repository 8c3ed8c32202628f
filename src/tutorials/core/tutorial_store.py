"""Tutorial store contract.

Responsibilities:
- Define the async operations every tutorial store provides
- Define the error taxonomy raised by stores
- Validate partial updates before they reach a backend

Each operation is one independent call to the backing store. Stores do no
locking, caching or batching.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tutorials.core.models import UPDATABLE_FIELDS, Tutorial, clean_update_fields

# =============================================================================
# EXCEPTIONS
# =============================================================================


class TutorialStoreError(Exception):
    """Base error for tutorial store operations."""


class TutorialValidationError(TutorialStoreError):
    """Input rejected before reaching the backing store."""


class TutorialNotFoundError(TutorialStoreError):
    """No tutorial with the requested id."""

    def __init__(self, tutorial_id: str):
        self.tutorial_id = tutorial_id
        super().__init__(f"Not found Tutorial with id {tutorial_id}")


class StorageError(TutorialStoreError):
    """Backing store unreachable or query failed."""


# =============================================================================
# STORE CONTRACT
# =============================================================================


def prepare_update(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize a partial update.

    Args:
        fields: Mapping of field name to new value

    Returns:
        Mapping with ``None`` values removed

    Raises:
        TutorialValidationError: If empty or naming unknown fields
    """
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise TutorialValidationError(
            f"Unknown fields: {', '.join(sorted(unknown))}"
        )

    cleaned = clean_update_fields(fields)
    if not cleaned:
        raise TutorialValidationError("Data to update can not be empty!")

    if "published" in cleaned and not isinstance(cleaned["published"], bool):
        raise TutorialValidationError("published must be a boolean")

    return cleaned


class TutorialStore(ABC):
    """Persistent collection of Tutorial records."""

    @abstractmethod
    async def create(
        self,
        title: str,
        description: str = "",
        published: bool | None = None,
    ) -> Tutorial:
        """Persist a new tutorial; ``published`` defaults to False."""

    @abstractmethod
    async def find_all(self) -> list[Tutorial]:
        """Return every tutorial in natural store order."""

    @abstractmethod
    async def find_by_id(self, tutorial_id: str) -> Tutorial:
        """Return the tutorial or raise TutorialNotFoundError."""

    @abstractmethod
    async def find_by_title_contains(self, substring: str) -> list[Tutorial]:
        """Case-insensitive substring match on title. Empty matches all."""

    @abstractmethod
    async def update(self, tutorial_id: str, fields: dict[str, Any]) -> Tutorial:
        """Apply supplied fields only and return the updated tutorial."""

    @abstractmethod
    async def delete_by_id(self, tutorial_id: str) -> Tutorial:
        """Remove and return the tutorial or raise TutorialNotFoundError."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every tutorial, returning how many were removed."""

    @abstractmethod
    async def find_all_published(self) -> list[Tutorial]:
        """Return tutorials with published set."""

    async def ping(self) -> bool:
        """Whether the backing store answers."""
        return True

    async def close(self) -> None:
        """Release backend resources."""
