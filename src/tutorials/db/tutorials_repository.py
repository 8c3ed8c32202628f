"""MongoDB-backed tutorial store.

Provides CRUD and search operations over the tutorials collection.
"""

from __future__ import annotations

import re
from typing import Any

import structlog
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from tutorials.core.models import Tutorial, utc_now
from tutorials.core.tutorial_store import (
    StorageError,
    TutorialNotFoundError,
    TutorialStore,
    prepare_update,
)

logger = structlog.get_logger(__name__)


def _object_id(tutorial_id: str) -> ObjectId:
    """Parse a tutorial id. Malformed ids cannot exist, so they are not found."""
    try:
        return ObjectId(tutorial_id)
    except (InvalidId, TypeError) as e:
        raise TutorialNotFoundError(tutorial_id) from e


def title_contains_filter(substring: str) -> dict[str, Any]:
    """Query matching ``substring`` anywhere in title, ignoring case."""
    if not substring:
        return {}
    return {"title": {"$regex": re.escape(substring), "$options": "i"}}


class MongoTutorialStore(TutorialStore):
    """Tutorial store over a motor collection."""

    def __init__(self, collection, client=None):
        """Initialize store.

        Args:
            collection: AsyncIOMotorCollection holding tutorial documents
            client: Owning AsyncIOMotorClient, closed by ``close()`` if given
        """
        self.collection = collection
        self.client = client

    async def _find_many(self, query: dict[str, Any]) -> list[Tutorial]:
        try:
            docs = await self.collection.find(query).to_list(length=None)
        except PyMongoError as e:
            logger.error("tutorials.query_failed", query=query, error=str(e))
            raise StorageError(f"Some error occurred while retrieving tutorials: {e}") from e
        return [Tutorial.from_document(doc) for doc in docs]

    async def create(
        self,
        title: str,
        description: str = "",
        published: bool | None = None,
    ) -> Tutorial:
        now = utc_now()
        doc = {
            "title": title,
            "description": description or "",
            "published": bool(published) if published is not None else False,
            "created_at": now,
            "updated_at": now,
        }

        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("tutorials.create_failed", error=str(e))
            raise StorageError(
                f"Some error occurred while creating the Tutorial: {e}"
            ) from e

        doc["_id"] = result.inserted_id
        logger.info("tutorials.created", tutorial_id=str(result.inserted_id))
        return Tutorial.from_document(doc)

    async def find_all(self) -> list[Tutorial]:
        return await self._find_many({})

    async def find_by_id(self, tutorial_id: str) -> Tutorial:
        oid = _object_id(tutorial_id)
        try:
            doc = await self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error("tutorials.find_failed", tutorial_id=tutorial_id, error=str(e))
            raise StorageError(
                f"Error retrieving Tutorial with id={tutorial_id}"
            ) from e

        if doc is None:
            raise TutorialNotFoundError(tutorial_id)
        return Tutorial.from_document(doc)

    async def find_by_title_contains(self, substring: str) -> list[Tutorial]:
        return await self._find_many(title_contains_filter(substring))

    async def update(self, tutorial_id: str, fields: dict[str, Any]) -> Tutorial:
        changes = prepare_update(fields)
        oid = _object_id(tutorial_id)
        changes["updated_at"] = utc_now()

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("tutorials.update_failed", tutorial_id=tutorial_id, error=str(e))
            raise StorageError(
                f"Error updating Tutorial with id={tutorial_id}"
            ) from e

        if doc is None:
            raise TutorialNotFoundError(tutorial_id)

        logger.info(
            "tutorials.updated",
            tutorial_id=tutorial_id,
            fields=sorted(k for k in changes if k != "updated_at"),
        )
        return Tutorial.from_document(doc)

    async def delete_by_id(self, tutorial_id: str) -> Tutorial:
        oid = _object_id(tutorial_id)
        try:
            doc = await self.collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            logger.error("tutorials.delete_failed", tutorial_id=tutorial_id, error=str(e))
            raise StorageError(
                f"Could not delete Tutorial with id={tutorial_id}"
            ) from e

        if doc is None:
            raise TutorialNotFoundError(tutorial_id)

        logger.info("tutorials.deleted", tutorial_id=tutorial_id)
        return Tutorial.from_document(doc)

    async def delete_all(self) -> int:
        try:
            result = await self.collection.delete_many({})
        except PyMongoError as e:
            logger.error("tutorials.delete_all_failed", error=str(e))
            raise StorageError(
                f"Some error occurred while removing all tutorials: {e}"
            ) from e

        logger.info("tutorials.deleted_all", count=result.deleted_count)
        return result.deleted_count

    async def find_all_published(self) -> list[Tutorial]:
        return await self._find_many({"published": True})

    async def ping(self) -> bool:
        if self.client is None:
            return True
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("database.ping_failed", error=str(e))
            return False
        return True

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("database.closed")
