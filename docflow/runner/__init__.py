"""Flow execution."""

from docflow.runner.errors import (
    FlowRunnerError,
    IllegalTransitionError,
    NoCurrentStateError,
    StateNotFoundError,
    TransitionNotFoundError,
)
from docflow.runner.flow_runner import UNKNOWN_STATE_LABEL, FlowRunner
from docflow.runner.results import RunOutcome, StateRunResult

__all__ = [
    "FlowRunner",
    "UNKNOWN_STATE_LABEL",
    "RunOutcome",
    "StateRunResult",
    "FlowRunnerError",
    "StateNotFoundError",
    "TransitionNotFoundError",
    "IllegalTransitionError",
    "NoCurrentStateError",
]
