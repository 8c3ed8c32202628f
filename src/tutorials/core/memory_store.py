"""In-process tutorial store.

Same semantics as the MongoDB store, kept in a dict. Used for tests and
for running the API without a database (``tutorials serve --memory``).
"""

from __future__ import annotations

import uuid
from typing import Any

import structlog

from tutorials.core.models import Tutorial, utc_now
from tutorials.core.tutorial_store import (
    TutorialNotFoundError,
    TutorialStore,
    prepare_update,
)

logger = structlog.get_logger(__name__)


class InMemoryTutorialStore(TutorialStore):
    """Dict-backed tutorial store. Insertion order is the natural order."""

    def __init__(self) -> None:
        self._records: dict[str, Tutorial] = {}

    @staticmethod
    def _copy(tutorial: Tutorial) -> Tutorial:
        return Tutorial(**tutorial.to_dict())

    def _get(self, tutorial_id: str) -> Tutorial:
        tutorial = self._records.get(tutorial_id)
        if tutorial is None:
            raise TutorialNotFoundError(tutorial_id)
        return tutorial

    async def create(
        self,
        title: str,
        description: str = "",
        published: bool | None = None,
    ) -> Tutorial:
        now = utc_now()
        tutorial = Tutorial(
            id=uuid.uuid4().hex,
            title=title,
            description=description or "",
            published=bool(published) if published is not None else False,
            created_at=now,
            updated_at=now,
        )
        self._records[tutorial.id] = tutorial
        logger.debug("tutorials.created", tutorial_id=tutorial.id, backend="memory")
        return self._copy(tutorial)

    async def find_all(self) -> list[Tutorial]:
        return [self._copy(t) for t in self._records.values()]

    async def find_by_id(self, tutorial_id: str) -> Tutorial:
        return self._copy(self._get(tutorial_id))

    async def find_by_title_contains(self, substring: str) -> list[Tutorial]:
        needle = substring.casefold()
        return [
            self._copy(t)
            for t in self._records.values()
            if needle in t.title.casefold()
        ]

    async def update(self, tutorial_id: str, fields: dict[str, Any]) -> Tutorial:
        changes = prepare_update(fields)
        tutorial = self._get(tutorial_id)
        for key, value in changes.items():
            setattr(tutorial, key, value)
        tutorial.updated_at = utc_now()
        logger.debug(
            "tutorials.updated",
            tutorial_id=tutorial_id,
            fields=sorted(changes),
            backend="memory",
        )
        return self._copy(tutorial)

    async def delete_by_id(self, tutorial_id: str) -> Tutorial:
        tutorial = self._get(tutorial_id)
        del self._records[tutorial_id]
        logger.debug("tutorials.deleted", tutorial_id=tutorial_id, backend="memory")
        return tutorial

    async def delete_all(self) -> int:
        count = len(self._records)
        self._records.clear()
        logger.debug("tutorials.deleted_all", count=count, backend="memory")
        return count

    async def find_all_published(self) -> list[Tutorial]:
        return [self._copy(t) for t in self._records.values() if t.published]
