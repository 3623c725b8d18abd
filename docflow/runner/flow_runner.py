"""Flow runner: walks a flow's state graph and runs agents along the way.

Example:
    runner = FlowRunner(flow, project, store)
    runner.set_start_state("intake")
    result = await runner.run_current_state()
    runner.transition_to("intake-to-review")
"""

from __future__ import annotations

import logging
from typing import Callable

from docflow.llm import LLMClient, get_llm_client
from docflow.models.documents import AgentDocument, FlowDocument, ProjectDocument
from docflow.models.flow import FlowState, FlowTransition
from docflow.models.llm_settings import DEFAULT_LLM_SETTINGS, LLMSettings
from docflow.runner.errors import (
    IllegalTransitionError,
    NoCurrentStateError,
    StateNotFoundError,
    TransitionNotFoundError,
)
from docflow.runner.results import RunOutcome, StateRunResult
from docflow.store.base import DocumentStore
from docflow.utils.prompt_template import render_prompt_template

logger = logging.getLogger(__name__)

UNKNOWN_STATE_LABEL = "Unknown State"


class FlowRunner:
    """Tracks the current position in a flow and executes per-state actions.

    The runner works on snapshots of the flow and project taken at
    construction; rebuild it to pick up edits.
    """

    def __init__(
        self,
        flow: FlowDocument,
        project: ProjectDocument,
        store: DocumentStore,
        client_factory: Callable[[str | None], LLMClient] = get_llm_client,
    ) -> None:
        """
        Args:
            flow: The flow to execute
            project: Project supplying the provider settings
            store: Document store used to load agents
            client_factory: Maps a provider id to a generative-text client
        """
        self.flow = flow.model_copy(deep=True)
        self.project = project.model_copy(deep=True)
        self.store = store
        self.client_factory = client_factory
        self._current_state_id: str | None = None

    # ---------- position ----------

    def set_start_state(self, state_id: str) -> None:
        """Place the runner on state_id. Can be called at any time to re-seed."""
        if self.flow.content.find_state(state_id) is None:
            raise StateNotFoundError(f"State with id={state_id} not found in the flow.")
        self._current_state_id = state_id
        logger.debug("flow %s positioned at %s", self.flow.doc_id, state_id)

    def get_current_state(self) -> FlowState | None:
        if self._current_state_id is None:
            return None
        return self.flow.content.find_state(self._current_state_id)

    def get_current_state_id(self) -> str | None:
        return self._current_state_id

    def get_available_transitions(self) -> list[FlowTransition]:
        """Transitions leaving the current state, in stored order."""
        if self._current_state_id is None:
            return []
        return self.flow.content.outgoing(self._current_state_id)

    def transition_to(self, transition_id: str) -> str:
        """Follow a transition and return the label of the state reached.

        The target is not required to exist: the runner still moves there and
        reports "Unknown State", and no transitions are available afterwards.
        """
        if self._current_state_id is None:
            raise TransitionNotFoundError(
                "No current state set. Call set_start_state() first."
            )

        transition = self.flow.content.find_transition(transition_id)
        if transition is None:
            raise TransitionNotFoundError(
                f"Transition with id={transition_id} not found in the flow."
            )

        if transition.source != self._current_state_id:
            raise IllegalTransitionError(
                f"Transition {transition_id} is not available from the current state."
            )

        self._current_state_id = transition.target
        logger.debug(
            "flow %s moved to %s via %s", self.flow.doc_id, transition.target, transition_id
        )

        new_state = self.get_current_state()
        return new_state.label if new_state else UNKNOWN_STATE_LABEL

    def reset(self) -> None:
        """Clear the current position."""
        self._current_state_id = None
        logger.debug("flow %s reset", self.flow.doc_id)

    # ---------- execution ----------

    def _llm_settings(self) -> LLMSettings:
        return self.project.content.llm_settings or DEFAULT_LLM_SETTINGS

    async def run_current_state(self) -> StateRunResult:
        """Run the agent bound to the current state.

        Raises NoCurrentStateError / StateNotFoundError for structural
        problems. Anything that goes wrong while running the agent is
        reported in the returned result instead.
        """
        if self._current_state_id is None:
            raise NoCurrentStateError("No current state set. Call set_start_state() first.")

        state = self.get_current_state()
        if state is None:
            raise StateNotFoundError(
                f"State with id={self._current_state_id} not found in the flow."
            )

        if not state.agent_id:
            return StateRunResult(
                outcome=RunOutcome.no_agent,
                state_id=state.id,
                message=(
                    f'State "{state.label}" ({state.type}) has no agent assigned, '
                    "so nothing to run."
                ),
            )

        try:
            return await self._run_agent(state)
        except Exception as e:
            logger.exception("agent %s failed in state %s", state.agent_id, state.id)
            return StateRunResult(
                outcome=RunOutcome.failed,
                state_id=state.id,
                agent_id=state.agent_id,
                message=f"Error running agent: {e}",
            )

    async def _run_agent(self, state: FlowState) -> StateRunResult:
        doc = self.store.get(state.agent_id)
        if doc is None:
            return StateRunResult(
                outcome=RunOutcome.agent_not_found,
                state_id=state.id,
                agent_id=state.agent_id,
                message=f"Error: Agent with id={state.agent_id} not found.",
            )
        if not isinstance(doc, AgentDocument):
            return StateRunResult(
                outcome=RunOutcome.not_an_agent,
                state_id=state.id,
                agent_id=state.agent_id,
                message=f"Error: Document with id={state.agent_id} is not an Agent.",
            )

        prompt = render_prompt_template(
            doc.content.prompt_template,
            {
                "stateName": state.label,
                "stateType": state.type,
                "flowName": self.flow.title,
            },
        )

        settings = self._llm_settings()
        client = self.client_factory(settings.provider)
        response = await client.call_llm(prompt, settings)

        return StateRunResult(
            outcome=RunOutcome.completed,
            state_id=state.id,
            agent_id=doc.doc_id,
            agent_title=doc.title,
            prompt=prompt,
            response=response,
            message=f"[Agent: {doc.title}]\n\nPrompt:\n{prompt}\n\nResponse:\n{response}",
        )
