"""Tests for the HTTP API.

The store and session registry are swapped through dependency overrides, so
no database file is touched.
"""

import json

import pytest
from fastapi.testclient import TestClient

from docflow.models.documents import AgentContent, AgentDocument, FlowDocument
from docflow.models.flow import FlowContent, FlowState, FlowTransition
from docflow.store.memory import InMemoryDocumentStore
from server.app import app
from server.db import get_store
from server import runner_routes
from server.runner_routes import get_session_registry


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def client(store):
    sessions = {}
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_session_registry] = lambda: sessions
    yield TestClient(app)
    app.dependency_overrides.clear()


def seed_flow(store: InMemoryDocumentStore) -> None:
    store.create(
        FlowDocument(
            doc_id="flow-1",
            title="Incident Review",
            content=FlowContent(
                states=[
                    FlowState(id="A", label="Intake", type="Start"),
                    FlowState(id="B", label="Analysis", agent_id="Ag1"),
                ],
                transitions=[
                    FlowTransition(id="t1", source="A", target="B"),
                    FlowTransition(id="t2", source="B", target="A"),
                ],
            ),
        )
    )
    store.create(
        AgentDocument(
            doc_id="Ag1",
            title="Analyst",
            content=AgentContent(prompt_template="Analyze {stateName} in {flowName}: {input}"),
        )
    )


class TestRoot:
    def test_health(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestDocumentRoutes:
    """Test document CRUD endpoints."""

    def test_create_and_get(self, client):
        response = client.post(
            "/api/documents",
            json={"doc_type": "Agent", "title": "Analyst", "content": {"prompt_template": "hi"}},
        )
        assert response.status_code == 201
        doc_id = response.json()["doc_id"]
        assert doc_id

        fetched = client.get(f"/api/documents/{doc_id}").json()
        assert fetched["doc_type"] == "Agent"
        assert fetched["content"]["prompt_template"] == "hi"

    def test_create_duplicate_conflicts(self, client):
        body = {"doc_id": "d1", "doc_type": "Flow", "title": "F"}
        assert client.post("/api/documents", json=body).status_code == 201
        assert client.post("/api/documents", json=body).status_code == 409

    def test_invalid_body_rejected(self, client):
        response = client.post("/api/documents", json={"doc_type": "Nope", "title": "x"})
        assert response.status_code == 422

    def test_get_missing(self, client):
        assert client.get("/api/documents/missing").status_code == 404

    def test_list_by_type(self, client, store):
        seed_flow(store)
        flows = client.get("/api/documents", params={"doc_type": "Flow"}).json()
        assert [d["doc_id"] for d in flows] == ["flow-1"]
        assert len(client.get("/api/documents").json()) == 2

    def test_list_unknown_type_rejected(self, client):
        response = client.get("/api/documents", params={"doc_type": "Spreadsheet"})
        assert response.status_code == 422

    def test_put_upserts(self, client):
        body = {"doc_type": "Flow", "title": "First"}
        assert client.put("/api/documents/f1", json=body).json()["doc_id"] == "f1"
        body["title"] = "Second"
        client.put("/api/documents/f1", json=body)
        assert client.get("/api/documents/f1").json()["title"] == "Second"

    def test_put_id_mismatch(self, client):
        body = {"doc_id": "other", "doc_type": "Flow", "title": "x"}
        assert client.put("/api/documents/f1", json=body).status_code == 400

    def test_delete(self, client, store):
        seed_flow(store)
        assert client.delete("/api/documents/flow-1").status_code == 200
        assert client.delete("/api/documents/flow-1").status_code == 404


class TestProjectRoutes:
    """Test project endpoints."""

    def test_create_project_and_attach_documents(self, client):
        project = client.post("/api/projects", json={"name": "Audit"}).json()
        project_id = project["doc_id"]
        assert project["content"]["name"] == "Audit"

        created = client.post(
            f"/api/projects/{project_id}/documents",
            json={"doc_type": "Flow", "title": "Intake"},
        )
        assert created.status_code == 201

        docs = client.get(f"/api/projects/{project_id}/documents").json()
        assert [d["title"] for d in docs] == ["Intake"]
        assert client.get(
            f"/api/projects/{project_id}/documents", params={"doc_type": "Agent"}
        ).json() == []

    def test_update_llm_settings(self, client, store):
        project_id = client.post("/api/projects", json={"name": "Audit"}).json()["doc_id"]
        response = client.put(
            f"/api/projects/{project_id}/llm-settings",
            json={"provider": "ollama", "model": "mistral"},
        )
        assert response.status_code == 200
        assert store.get(project_id).content.llm_settings.model == "mistral"

    def test_llm_settings_validated(self, client):
        project_id = client.post("/api/projects", json={"name": "Audit"}).json()["doc_id"]
        response = client.put(
            f"/api/projects/{project_id}/llm-settings", json={"temperature": 3}
        )
        assert response.status_code == 422

    def test_unknown_project(self, client):
        assert client.get("/api/projects/missing/documents").status_code == 404

    def test_agent_variables(self, client, store):
        seed_flow(store)
        response = client.get("/api/agents/Ag1/variables")
        assert response.json() == {
            "agent_id": "Ag1",
            "variables": ["stateName", "flowName", "input"],
        }
        assert client.get("/api/agents/flow-1/variables").status_code == 404


class TestRunnerRoutes:
    """Test driving a flow over HTTP."""

    def open_session(self, client, store) -> str:
        seed_flow(store)
        project_id = client.post("/api/projects", json={"name": "Audit"}).json()["doc_id"]
        response = client.post(
            "/api/runner/sessions", json={"flow_id": "flow-1", "project_id": project_id}
        )
        assert response.status_code == 201
        return response.json()["session_id"]

    def test_walk_flow(self, client, store):
        session_id = self.open_session(client, store)
        base = f"/api/runner/sessions/{session_id}"

        snap = client.post(f"{base}/start", json={"state_id": "A"}).json()
        assert snap["current_state_id"] == "A"
        assert [t["id"] for t in snap["available_transitions"]] == ["t1"]

        run = client.post(f"{base}/run").json()
        assert run["result"]["outcome"] == "no_agent"

        moved = client.post(f"{base}/transitions/t1").json()
        assert moved["state_label"] == "Analysis"

        run = client.post(f"{base}/run").json()
        assert run["result"]["outcome"] == "completed"
        assert "[SIMULATED LLM RESPONSE]" in run["result"]["response"]
        assert run["session"]["log"][-1].startswith("[Agent: Analyst]")

    def test_missing_flow(self, client):
        project_id = client.post("/api/projects", json={"name": "Audit"}).json()["doc_id"]
        response = client.post(
            "/api/runner/sessions", json={"flow_id": "nope", "project_id": project_id}
        )
        assert response.status_code == 404

    def test_error_mapping(self, client, store):
        session_id = self.open_session(client, store)
        base = f"/api/runner/sessions/{session_id}"

        assert client.post(f"{base}/start", json={"state_id": "Z"}).status_code == 404
        client.post(f"{base}/start", json={"state_id": "A"})
        assert client.post(f"{base}/transitions/t2").status_code == 409
        assert client.post(f"{base}/transitions/nope").status_code == 404

    def test_run_after_reset(self, client, store):
        session_id = self.open_session(client, store)
        base = f"/api/runner/sessions/{session_id}"
        client.post(f"{base}/start", json={"state_id": "A"})

        snap = client.post(f"{base}/reset").json()
        assert snap["current_state_id"] is None

        run = client.post(f"{base}/run").json()
        assert run["result"] is None
        assert run["session"]["log"][-1] == "No current state selected."

    def test_trace_dir_receives_jsonl(self, client, store, tmp_path, monkeypatch):
        """With a trace directory configured, each session writes its own file."""
        monkeypatch.setattr(runner_routes, "DOCFLOW_TRACE_DIR", str(tmp_path))
        session_id = self.open_session(client, store)
        client.post(f"/api/runner/sessions/{session_id}/start", json={"state_id": "A"})

        lines = (tmp_path / f"{session_id}.jsonl").read_text().splitlines()
        assert json.loads(lines[-1])["message"] == 'Starting flow at state: "Intake" (Start)'

    def test_close_session(self, client, store):
        session_id = self.open_session(client, store)
        assert client.get(f"/api/runner/sessions/{session_id}").status_code == 200
        assert client.delete(f"/api/runner/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/runner/sessions/{session_id}").status_code == 404
