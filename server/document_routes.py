"""API routes for workspace documents.

Bodies are validated through the document union, so the `doc_type` field
picks the concrete model.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from docflow.models.documents import DocType, Document, parse_document
from docflow.store.base import DocumentExistsError, DocumentNotFoundError, DocumentStore
from server.db import get_store

router = APIRouter()


# --- Helper Functions ---


def parse_document_body(payload: dict[str, Any]) -> Document:
    """Validate a request body into a document, 422 on bad input."""
    try:
        return parse_document(payload)
    except ValidationError as e:
        raise HTTPException(
            status_code=422, detail=e.errors(include_url=False, include_context=False)
        ) from e


def dump_document(doc: Document) -> dict[str, Any]:
    return doc.model_dump(mode="json")


# --- API Endpoints ---


@router.get("/documents")
def list_documents(
    doc_type: DocType | None = None,
    store: DocumentStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """list stored documents, optionally of one type."""
    docs = store.list(doc_type.value if doc_type else None)
    return [dump_document(doc) for doc in docs]


@router.get("/documents/{doc_id}")
def get_document(doc_id: str, store: DocumentStore = Depends(get_store)) -> dict[str, Any]:
    """get a single document."""
    doc = store.get(doc_id)
    if not doc:
        raise HTTPException(status_code=404, detail=f"Document not found: {doc_id}")
    return dump_document(doc)


@router.post("/documents", status_code=201)
def create_document(
    payload: dict[str, Any] = Body(...),
    store: DocumentStore = Depends(get_store),
) -> dict[str, Any]:
    """create a document. An empty doc_id gets a generated one."""
    doc = parse_document_body(payload)
    try:
        created = store.create(doc)
    except DocumentExistsError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return dump_document(created)


@router.put("/documents/{doc_id}")
def upsert_document(
    doc_id: str,
    payload: dict[str, Any] = Body(...),
    store: DocumentStore = Depends(get_store),
) -> dict[str, Any]:
    """create or replace a document."""
    doc = parse_document_body(payload)
    if doc.doc_id and doc.doc_id != doc_id:
        raise HTTPException(
            status_code=400,
            detail=f"Document id mismatch: path {doc_id}, body {doc.doc_id}",
        )
    doc = doc.model_copy(update={"doc_id": doc_id})

    if store.get(doc_id):
        return dump_document(store.update(doc))
    return dump_document(store.create(doc))


@router.delete("/documents/{doc_id}")
def delete_document(doc_id: str, store: DocumentStore = Depends(get_store)) -> dict:
    """delete a document."""
    try:
        store.delete(doc_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"status": "deleted", "doc_id": doc_id}
