"""SDK for driving flows interactively."""

from docflow.sdk.session import FlowRunnerSession, SessionSnapshot

__all__ = [
    "FlowRunnerSession",
    "SessionSnapshot",
]
