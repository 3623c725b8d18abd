"""Document storage."""

from docflow.store.base import (
    DocumentExistsError,
    DocumentNotFoundError,
    DocumentStore,
    DocumentStoreError,
)
from docflow.store.memory import InMemoryDocumentStore

__all__ = [
    "DocumentStore",
    "DocumentStoreError",
    "DocumentExistsError",
    "DocumentNotFoundError",
    "InMemoryDocumentStore",
]
