"""API routes for projects and the documents they own."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from docflow.models.documents import (
    AgentDocument,
    DocType,
    ProjectContent,
    ProjectDocument,
)
from docflow.models.llm_settings import LLMSettings
from docflow.store.base import DocumentExistsError, DocumentStore
from docflow.utils.prompt_template import find_placeholders
from server.db import get_store
from server.document_routes import dump_document, parse_document_body

router = APIRouter()


class CreateProjectRequest(BaseModel):
    """request body for creating a project."""

    name: str
    title: str | None = None
    llm_settings: LLMSettings | None = None


class AgentVariablesResponse(BaseModel):
    """placeholders found in an agent's prompt template."""

    agent_id: str
    variables: list[str]


def _load_project(store: DocumentStore, project_id: str) -> ProjectDocument:
    doc = store.get(project_id)
    if not isinstance(doc, ProjectDocument):
        raise HTTPException(status_code=404, detail=f"Project not found: {project_id}")
    return doc


# --- API Endpoints ---


@router.post("/projects", status_code=201)
def create_project(
    request: CreateProjectRequest,
    store: DocumentStore = Depends(get_store),
) -> ProjectDocument:
    """create an empty project."""
    project = ProjectDocument(
        title=request.title or request.name,
        content=ProjectContent(name=request.name, llm_settings=request.llm_settings),
    )
    return store.create(project)


@router.get("/projects/{project_id}/documents")
def list_project_documents(
    project_id: str,
    doc_type: DocType | None = None,
    store: DocumentStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """list the documents a project references.

    References to documents that no longer exist are skipped.
    """
    project = _load_project(store, project_id)
    refs = project.content.documents
    if doc_type is not None:
        refs = project.content.refs_of_type(doc_type)

    docs = []
    for ref in refs:
        doc = store.get(ref.doc_id)
        if doc:
            docs.append(dump_document(doc))
    return docs


@router.post("/projects/{project_id}/documents", status_code=201)
def add_project_document(
    project_id: str,
    payload: dict[str, Any] = Body(...),
    store: DocumentStore = Depends(get_store),
) -> dict[str, Any]:
    """create a document and attach it to the project."""
    project = _load_project(store, project_id)
    doc = parse_document_body(payload)
    try:
        created = store.create(doc)
    except DocumentExistsError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    project.content.add_reference(created.to_ref())
    store.update(project)
    return dump_document(created)


@router.put("/projects/{project_id}/llm-settings")
def update_llm_settings(
    project_id: str,
    settings: LLMSettings,
    store: DocumentStore = Depends(get_store),
) -> ProjectDocument:
    """replace the project's provider settings."""
    project = _load_project(store, project_id)
    project.content.llm_settings = settings
    return store.update(project)


@router.get("/agents/{agent_id}/variables")
def get_agent_variables(
    agent_id: str,
    store: DocumentStore = Depends(get_store),
) -> AgentVariablesResponse:
    """list the placeholders used by an agent's prompt template."""
    doc = store.get(agent_id)
    if not isinstance(doc, AgentDocument):
        raise HTTPException(status_code=404, detail=f"Agent not found: {agent_id}")
    return AgentVariablesResponse(
        agent_id=agent_id,
        variables=find_placeholders(doc.content.prompt_template),
    )
