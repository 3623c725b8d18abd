"""Document store protocol and errors."""

from typing import Protocol

from docflow.models.documents import Document


class DocumentStoreError(Exception):
    """Base exception for document store failures."""
    pass


class DocumentExistsError(DocumentStoreError):
    """Raised when creating a document whose doc_id is already taken."""
    pass


class DocumentNotFoundError(DocumentStoreError):
    """Raised when updating or deleting a document that does not exist."""
    pass


class DocumentStore(Protocol):
    """Protocol for key-value document storage keyed by doc_id."""

    def get(self, doc_id: str) -> Document | None:
        """Return the document or None if not found."""
        ...

    def create(self, doc: Document) -> Document:
        """Insert a new document, generating a doc_id when empty."""
        ...

    def update(self, doc: Document) -> Document:
        """Replace an existing document."""
        ...

    def delete(self, doc_id: str) -> None:
        """Remove a document."""
        ...

    def list(self, doc_type: str | None = None) -> list[Document]:
        """List all documents, optionally restricted to one type."""
        ...
