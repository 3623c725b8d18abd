"""Result of running the current state of a flow."""

from enum import Enum

from pydantic import BaseModel


class RunOutcome(str, Enum):
    """How a state run ended."""

    no_agent = "no_agent"
    completed = "completed"
    agent_not_found = "agent_not_found"
    not_an_agent = "not_an_agent"
    failed = "failed"


class StateRunResult(BaseModel):
    """Successful return of run_current_state.

    The run itself may have failed (missing agent, unreachable backend); the
    message then describes the failure for display.
    """

    outcome: RunOutcome
    state_id: str
    message: str

    agent_id: str | None = None
    agent_title: str | None = None
    prompt: str | None = None
    response: str | None = None

    @property
    def is_error(self) -> bool:
        return self.outcome in (
            RunOutcome.agent_not_found,
            RunOutcome.not_an_agent,
            RunOutcome.failed,
        )

    def __str__(self) -> str:
        return self.message
