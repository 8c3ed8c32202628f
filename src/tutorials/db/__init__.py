"""Database module for MongoDB persistence.

Provides:
- Motor client creation from configuration
- MongoTutorialStore over the tutorials collection
"""

from tutorials.db.database import create_client, open_tutorial_store
from tutorials.db.tutorials_repository import MongoTutorialStore

__all__ = ["MongoTutorialStore", "create_client", "open_tutorial_store"]
