"""API routes for interactive flow runner sessions.

Sessions live in process memory; restarting the server drops them. Nothing
expires them: a session and its log stay until DELETE /runner/sessions/{id}.
"""

import logging
import os
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from docflow.adapters.sinks import FanOutSink, FileSink, LoggingSink, TraceSink
from docflow.models.documents import FlowDocument, ProjectDocument
from docflow.runner.errors import (
    FlowRunnerError,
    IllegalTransitionError,
    NoCurrentStateError,
)
from docflow.runner.flow_runner import FlowRunner
from docflow.runner.results import StateRunResult
from docflow.sdk.session import FlowRunnerSession, SessionSnapshot
from docflow.store.base import DocumentStore
from docflow.utils.identifiers import generate_session_id
from server.db import get_store

logger = logging.getLogger(__name__)

router = APIRouter()

DOCFLOW_TRACE_DIR = os.getenv("DOCFLOW_TRACE_DIR")

_sessions: dict[str, FlowRunnerSession] = {}


def get_session_registry() -> dict[str, FlowRunnerSession]:
    """in-process registry of open sessions."""
    return _sessions


class CreateSessionRequest(BaseModel):
    """request body for opening a runner session."""

    flow_id: str
    project_id: str


class StartRequest(BaseModel):
    state_id: str


class RunStateResponse(BaseModel):
    """outcome of running the current state, None when nothing was selected."""

    result: StateRunResult | None
    session: SessionSnapshot


class TransitionResponse(BaseModel):
    state_label: str
    session: SessionSnapshot


# --- Helper Functions ---


def _trace_sink(session_id: str) -> TraceSink:
    """Sink for a new session: the log, plus a JSONL file when configured."""
    if DOCFLOW_TRACE_DIR:
        return FanOutSink(
            LoggingSink(),
            FileSink(Path(DOCFLOW_TRACE_DIR) / f"{session_id}.jsonl"),
        )
    return LoggingSink()


def _get_session(
    session_id: str, sessions: dict[str, FlowRunnerSession]
) -> FlowRunnerSession:
    session = sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return session


def _to_http_error(error: FlowRunnerError) -> HTTPException:
    """Map a structural runner error to an HTTP status."""
    if isinstance(error, (IllegalTransitionError, NoCurrentStateError)):
        return HTTPException(status_code=409, detail=str(error))
    return HTTPException(status_code=404, detail=str(error))


# --- API Endpoints ---


@router.post("/runner/sessions", status_code=201)
async def create_session(
    request: CreateSessionRequest,
    store: DocumentStore = Depends(get_store),
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> SessionSnapshot:
    """open a runner session over a flow and its project."""
    flow = store.get(request.flow_id)
    if not isinstance(flow, FlowDocument):
        raise HTTPException(status_code=404, detail=f"Flow not found: {request.flow_id}")
    project = store.get(request.project_id)
    if not isinstance(project, ProjectDocument):
        raise HTTPException(
            status_code=404, detail=f"Project not found: {request.project_id}"
        )

    session_id = generate_session_id()
    session = FlowRunnerSession(
        FlowRunner(flow, project, store),
        sink=_trace_sink(session_id),
        session_id=session_id,
    )
    sessions[session_id] = session
    logger.info("opened session %s for flow %s", session_id, flow.doc_id)
    return session.snapshot()


@router.get("/runner/sessions/{session_id}")
async def get_session(
    session_id: str,
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> SessionSnapshot:
    """get the current state of a session."""
    session = _get_session(session_id, sessions)
    async with session.lock:
        return session.snapshot()


@router.post("/runner/sessions/{session_id}/start")
async def start_session(
    session_id: str,
    request: StartRequest,
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> SessionSnapshot:
    """place the session on a start state."""
    session = _get_session(session_id, sessions)
    async with session.lock:
        try:
            session.start(request.state_id)
        except FlowRunnerError as e:
            raise _to_http_error(e) from e
        return session.snapshot()


@router.post("/runner/sessions/{session_id}/run")
async def run_state(
    session_id: str,
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> RunStateResponse:
    """run the agent bound to the current state."""
    session = _get_session(session_id, sessions)
    async with session.lock:
        try:
            result = await session.run_state()
        except FlowRunnerError as e:
            raise _to_http_error(e) from e
        return RunStateResponse(result=result, session=session.snapshot())


@router.post("/runner/sessions/{session_id}/transitions/{transition_id}")
async def follow_transition(
    session_id: str,
    transition_id: str,
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> TransitionResponse:
    """follow a transition leaving the current state."""
    session = _get_session(session_id, sessions)
    async with session.lock:
        try:
            label = session.follow(transition_id)
        except FlowRunnerError as e:
            raise _to_http_error(e) from e
        return TransitionResponse(state_label=label, session=session.snapshot())


@router.post("/runner/sessions/{session_id}/reset")
async def reset_session(
    session_id: str,
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> SessionSnapshot:
    """clear the session's position."""
    session = _get_session(session_id, sessions)
    async with session.lock:
        session.reset()
        return session.snapshot()


@router.delete("/runner/sessions/{session_id}")
async def close_session(
    session_id: str,
    sessions: dict[str, FlowRunnerSession] = Depends(get_session_registry),
) -> dict:
    """close a session."""
    session = _get_session(session_id, sessions)
    async with session.lock:
        del sessions[session_id]
    logger.info("closed session %s", session_id)
    return {"status": "deleted", "session_id": session_id}
