"""Structural errors raised by the flow runner.

These signal caller misuse or a malformed flow. Failures while running an
agent are not raised; they come back inside a StateRunResult.
"""


class FlowRunnerError(Exception):
    """Base exception for flow runner misuse."""
    pass


class StateNotFoundError(FlowRunnerError):
    """Raised when a state id does not exist in the flow."""
    pass


class TransitionNotFoundError(FlowRunnerError):
    """Raised when a transition id does not exist, or no state is set."""
    pass


class IllegalTransitionError(FlowRunnerError):
    """Raised when a transition does not leave the current state."""
    pass


class NoCurrentStateError(FlowRunnerError):
    """Raised when running a state before a start state was set."""
    pass
