"""Core domain: the Tutorial record and the store contract."""

from tutorials.core.memory_store import InMemoryTutorialStore
from tutorials.core.models import Tutorial
from tutorials.core.tutorial_store import (
    StorageError,
    TutorialNotFoundError,
    TutorialStore,
    TutorialStoreError,
    TutorialValidationError,
)

__all__ = [
    "InMemoryTutorialStore",
    "StorageError",
    "Tutorial",
    "TutorialNotFoundError",
    "TutorialStore",
    "TutorialStoreError",
    "TutorialValidationError",
]
