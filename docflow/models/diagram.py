"""Data model for Why-Because Analysis diagrams.

Diagrams are stored and served like any other document; editing them is
left to the client.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class WBANodeType(str, Enum):
    """Node kinds used in Why-Because Analysis."""

    incident = "Incident"
    damage = "Damage"
    event = "Event"
    unevent = "UnEvent"
    state = "State"
    assumption = "Assumption"
    process = "Process"
    action_item = "ActionItem"
    proximate_cause = "ProximateCause"
    generic_node = "GenericNode"


class DiagramNode(BaseModel):
    """a node in the diagram."""

    id: str
    type: str = WBANodeType.generic_node.value
    label: str
    properties: dict[str, Any] = Field(default_factory=dict)


class DiagramEdge(BaseModel):
    """a directed causal link between two nodes."""

    id: str
    source: str
    target: str
    type: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)


class DiagramContent(BaseModel):
    nodes: list[DiagramNode] = Field(default_factory=list)
    edges: list[DiagramEdge] = Field(default_factory=list)
