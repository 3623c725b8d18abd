"""Tests for document models and the tagged document union."""

import json

import pytest
from pydantic import ValidationError

from docflow.models.documents import (
    AgentContent,
    AgentDocument,
    DiagramDocument,
    DocRef,
    DocType,
    FlowDocument,
    ProjectContent,
    ProjectDocument,
    parse_document,
)
from docflow.models.flow import FlowContent, FlowState, FlowTransition
from docflow.models.llm_settings import DEFAULT_LLM_SETTINGS, LLMSettings
from docflow.models.trace_entry import TraceEntry, TraceLevel


class TestDocumentUnion:
    """Test that the doc_type tag selects the concrete model."""

    def test_parse_agent_from_dict(self):
        """An Agent payload should validate into AgentDocument."""
        doc = parse_document(
            {
                "doc_id": "ag-1",
                "doc_type": "Agent",
                "title": "Analyst",
                "content": {"prompt_template": "Analyze {stateName}"},
            }
        )
        assert isinstance(doc, AgentDocument)
        assert doc.content.prompt_template == "Analyze {stateName}"

    def test_parse_flow_from_json(self):
        """A Flow JSON string should validate into FlowDocument."""
        raw = json.dumps(
            {
                "doc_id": "f-1",
                "doc_type": "Flow",
                "title": "Intake",
                "content": {
                    "states": [{"id": "A", "label": "Start here", "type": "Start"}],
                    "transitions": [],
                },
            }
        )
        doc = parse_document(raw)
        assert isinstance(doc, FlowDocument)
        assert doc.content.states[0].label == "Start here"

    def test_stored_json_restores_same_type(self):
        """A dumped document should come back as the same concrete type."""
        project = ProjectDocument(
            doc_id="p-1",
            title="Plant audit",
            content=ProjectContent(name="Plant audit", llm_settings=LLMSettings(provider="ollama")),
        )
        restored = parse_document(project.model_dump_json())
        assert isinstance(restored, ProjectDocument)
        assert restored == project

    def test_diagram_defaults_to_empty_graph(self):
        doc = parse_document({"doc_type": "Diagram", "title": "Why did it fail"})
        assert isinstance(doc, DiagramDocument)
        assert doc.content.nodes == []
        assert doc.doc_id == ""

    def test_unknown_doc_type_rejected(self):
        """Types outside the union should fail validation."""
        with pytest.raises(ValidationError):
            parse_document({"doc_id": "x", "doc_type": "Spreadsheet", "title": "x"})

    def test_to_ref_carries_type_and_title(self):
        agent = AgentDocument(doc_id="ag-1", title="Analyst", content=AgentContent())
        assert agent.to_ref() == DocRef(doc_id="ag-1", doc_type="Agent", title="Analyst")
        assert agent.to_ref().doc_type == DocType.agent

    def test_ref_with_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            DocRef(doc_id="x", doc_type="Spreadsheet")


class TestProjectContent:
    """Test project reference bookkeeping."""

    def test_refs_of_type_keeps_order(self):
        content = ProjectContent(
            name="p",
            documents=[
                DocRef(doc_id="f1", doc_type="Flow"),
                DocRef(doc_id="a1", doc_type="Agent"),
                DocRef(doc_id="f2", doc_type="Flow"),
            ],
        )
        assert [r.doc_id for r in content.refs_of_type("Flow")] == ["f1", "f2"]

    def test_add_reference_replaces_same_id(self):
        """Adding a reference twice should keep one entry with the newest title."""
        content = ProjectContent(name="p")
        content.add_reference(DocRef(doc_id="a1", doc_type="Agent", title="old"))
        content.add_reference(DocRef(doc_id="a1", doc_type="Agent", title="new"))
        assert len(content.documents) == 1
        assert content.documents[0].title == "new"


class TestFlowContent:
    """Test graph lookups on flow content."""

    def setup_method(self):
        self.content = FlowContent(
            states=[FlowState(id="A", label="A"), FlowState(id="B", label="B")],
            transitions=[
                FlowTransition(id="t1", source="A", target="B", properties={"label": "next"}),
                FlowTransition(id="t2", source="B", target="A"),
                FlowTransition(id="t3", source="A", target="A"),
            ],
        )

    def test_outgoing_in_stored_order(self):
        assert [t.id for t in self.content.outgoing("A")] == ["t1", "t3"]

    def test_outgoing_for_unknown_state_is_empty(self):
        assert self.content.outgoing("missing") == []

    def test_transition_label_from_properties(self):
        assert self.content.find_transition("t1").label == "next"
        assert self.content.find_transition("t2").label is None

    def test_state_type_defaults_to_normal(self):
        assert self.content.find_state("A").type == "Normal"


class TestLLMSettings:
    """Test provider configuration validation."""

    def test_defaults_use_simulated_provider(self):
        assert DEFAULT_LLM_SETTINGS.provider == "dummy"
        assert DEFAULT_LLM_SETTINGS.model == "default"
        assert DEFAULT_LLM_SETTINGS.temperature == 0.7
        assert DEFAULT_LLM_SETTINGS.max_tokens == 1000

    def test_temperature_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            LLMSettings(temperature=1.5)

    def test_max_tokens_must_be_positive(self):
        with pytest.raises(ValidationError):
            LLMSettings(max_tokens=0)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            LLMSettings(provider="ollama", top_k=5)


class TestTraceEntry:
    def test_level_defaults_to_info(self):
        entry = TraceEntry(
            entry_id="e1",
            session_id="s1",
            timestamp="2024-01-01T00:00:00+00:00",
            sequence=0,
            message="hello",
        )
        assert entry.level == TraceLevel.info
