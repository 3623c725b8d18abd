"""Data model for flow state machines.

A flow is a directed graph of named states connected by transitions. The
graph is not validated: cycles, self-loops and unreachable states are all
allowed, and transitions may point at states that no longer exist.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class FlowStateType(str, Enum):
    """State types offered by the flow editor. Not enforced by the runner."""

    start = "Start"
    normal = "Normal"
    decision = "Decision"
    final = "Final"


class FlowState(BaseModel):
    """a node in the flow, optionally bound to an agent."""

    id: str
    label: str
    type: str = FlowStateType.normal.value
    agent_id: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)


class FlowTransition(BaseModel):
    """a directed edge between two states."""

    id: str
    source: str
    target: str
    type: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def label(self) -> str | None:
        """Display label, conventionally kept in the property bag."""
        return self.properties.get("label")


class FlowContent(BaseModel):
    """the full graph of a flow document."""

    states: list[FlowState] = Field(default_factory=list)
    transitions: list[FlowTransition] = Field(default_factory=list)

    def find_state(self, state_id: str) -> FlowState | None:
        for state in self.states:
            if state.id == state_id:
                return state
        return None

    def find_transition(self, transition_id: str) -> FlowTransition | None:
        for transition in self.transitions:
            if transition.id == transition_id:
                return transition
        return None

    def outgoing(self, state_id: str) -> list[FlowTransition]:
        """All transitions leaving state_id, in stored order."""
        return [t for t in self.transitions if t.source == state_id]
