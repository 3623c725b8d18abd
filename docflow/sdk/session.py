"""Interactive runner sessions.

A session wraps one FlowRunner and narrates every step to a trace sink, the
way a run log panel would. Structural errors are recorded and then re-raised
so the caller still decides what to do with them.

Example:
    session = FlowRunnerSession(FlowRunner(flow, project, store))
    session.start("intake")
    await session.run_state()
    session.follow("intake-to-review")
    print(session.history.messages)
"""

from __future__ import annotations

import asyncio

from pydantic import BaseModel

from docflow.adapters.sinks import FanOutSink, ListSink, TraceSink
from docflow.adapters.trace_log import TraceLog
from docflow.models.flow import FlowState, FlowTransition
from docflow.runner.errors import FlowRunnerError
from docflow.runner.flow_runner import FlowRunner
from docflow.runner.results import StateRunResult
from docflow.utils.identifiers import generate_session_id


class SessionSnapshot(BaseModel):
    """Observable state of a session after the last step."""

    session_id: str
    flow_id: str
    flow_title: str
    project_id: str
    current_state_id: str | None
    current_state: FlowState | None
    available_transitions: list[FlowTransition]
    log: list[str]


class FlowRunnerSession:
    """Drives a FlowRunner on behalf of a single caller.

    `lock` serializes access when the session is shared between tasks;
    the session itself does not acquire it.
    """

    def __init__(
        self,
        runner: FlowRunner,
        sink: TraceSink | None = None,
        session_id: str | None = None,
    ) -> None:
        self.session_id = session_id or generate_session_id()
        self.runner = runner
        self.history = ListSink()
        target: TraceSink = FanOutSink(self.history, sink) if sink else self.history
        self.trace = TraceLog(self.session_id, target)
        self.lock = asyncio.Lock()
        self.trace.info(f'Flow "{runner.flow.title}" loaded and ready to run.')

    def start(self, state_id: str) -> FlowState:
        """Set the start state."""
        try:
            self.runner.set_start_state(state_id)
        except FlowRunnerError as e:
            self.trace.error(f"Error setting start state: {e}")
            raise

        state = self.runner.get_current_state()
        self.trace.info(f'Starting flow at state: "{state.label}" ({state.type})')
        return state

    async def run_state(self) -> StateRunResult | None:
        """Run the current state. Returns None when no state is selected."""
        if self.runner.get_current_state_id() is None:
            self.trace.info("No current state selected.")
            return None

        self.trace.info("Running agent...")
        try:
            result = await self.runner.run_current_state()
        except FlowRunnerError as e:
            self.trace.error(f"Error running state: {e}")
            raise

        if result.is_error:
            self.trace.error(result.message)
        else:
            self.trace.result(result.message)
        return result

    def follow(self, transition_id: str) -> str:
        """Follow a transition and return the label of the new state."""
        flow = self.runner.flow.content
        transition = flow.find_transition(transition_id)
        target = flow.find_state(transition.target) if transition else None
        if transition and target:
            label = transition.label or "Unnamed Transition"
            self.trace.info(f'Following transition: "{label}" to state "{target.label}"')

        try:
            new_label = self.runner.transition_to(transition_id)
        except FlowRunnerError as e:
            self.trace.error(f"Error transitioning: {e}")
            raise

        self.trace.info(f'Now at state: "{new_label}"')
        return new_label

    def reset(self) -> None:
        self.runner.reset()
        self.trace.info("Flow reset. Select a start state to begin again.")

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            flow_id=self.runner.flow.doc_id,
            flow_title=self.runner.flow.title,
            project_id=self.runner.project.doc_id,
            current_state_id=self.runner.get_current_state_id(),
            current_state=self.runner.get_current_state(),
            available_transitions=self.runner.get_available_transitions(),
            log=self.history.messages,
        )
