"""In-memory document store."""

from docflow.models.documents import Document
from docflow.store.base import DocumentExistsError, DocumentNotFoundError
from docflow.utils.identifiers import generate_doc_id


class InMemoryDocumentStore:
    """Stores documents in a dict.

    Documents are copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._documents: dict[str, Document] = {}
        for doc in documents or []:
            self.create(doc)

    def get(self, doc_id: str) -> Document | None:
        doc = self._documents.get(doc_id)
        return doc.model_copy(deep=True) if doc else None

    def create(self, doc: Document) -> Document:
        if not doc.doc_id:
            doc = doc.model_copy(update={"doc_id": generate_doc_id()})
        if doc.doc_id in self._documents:
            raise DocumentExistsError(f"Document already exists: {doc.doc_id}")
        self._documents[doc.doc_id] = doc.model_copy(deep=True)
        return doc

    def update(self, doc: Document) -> Document:
        if doc.doc_id not in self._documents:
            raise DocumentNotFoundError(f"Document not found: {doc.doc_id}")
        self._documents[doc.doc_id] = doc.model_copy(deep=True)
        return doc

    def delete(self, doc_id: str) -> None:
        if doc_id not in self._documents:
            raise DocumentNotFoundError(f"Document not found: {doc_id}")
        del self._documents[doc_id]

    def list(self, doc_type: str | None = None) -> list[Document]:
        return [
            doc.model_copy(deep=True)
            for doc in self._documents.values()
            if doc_type is None or doc.doc_type == doc_type
        ]
