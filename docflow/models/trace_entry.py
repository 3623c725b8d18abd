"""Trace entries emitted while a flow is being driven.

Each entry is one human-readable line for a run log panel.
"""

from enum import Enum

from pydantic import BaseModel


class TraceLevel(str, Enum):
    """Kinds of trace entries."""

    info = "info"
    result = "result"  # output of running a state
    error = "error"


class TraceEntry(BaseModel):
    """A single progress message from a runner session."""

    model_config = {"extra": "forbid"}

    entry_id: str
    session_id: str
    timestamp: str
    sequence: int  # monotonic ordering within a session

    level: TraceLevel = TraceLevel.info
    message: str
