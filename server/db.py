"""database initialization helpers."""

from functools import lru_cache

from server.document_db import DOCFLOW_DB_PATH, SqliteDocumentStore


@lru_cache(maxsize=1)
def get_store() -> SqliteDocumentStore:
    """shared document store used by the API routes."""
    return SqliteDocumentStore(DOCFLOW_DB_PATH)


def init_all() -> None:
    """initialize all sqlite tables."""
    get_store().init_db()
