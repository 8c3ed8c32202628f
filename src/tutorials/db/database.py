"""MongoDB connection management.

Opens the motor client once at process start; the client keeps its own
connection pool and is shared by every request until shutdown.
"""

from __future__ import annotations

import structlog
from motor.motor_asyncio import AsyncIOMotorClient

from tutorials.config.app_config import DatabaseConfig
from tutorials.db.tutorials_repository import MongoTutorialStore

logger = structlog.get_logger(__name__)


def create_client(config: DatabaseConfig) -> AsyncIOMotorClient:
    """Create a motor client for the configured connection string.

    The driver connects lazily; the first operation (or ``ping``) surfaces
    an unreachable server after ``server_selection_timeout_ms``.
    """
    client = AsyncIOMotorClient(
        config.url,
        serverSelectionTimeoutMS=config.server_selection_timeout_ms,
    )
    logger.info(
        "database.client_created",
        database=config.get_database_name(),
        collection=config.collection,
    )
    return client


def open_tutorial_store(config: DatabaseConfig) -> MongoTutorialStore:
    """Build a MongoTutorialStore bound to the configured collection."""
    client = create_client(config)
    collection = client[config.get_database_name()][config.collection]
    return MongoTutorialStore(collection, client=client)
