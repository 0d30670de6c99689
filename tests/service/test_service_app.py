"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from handoff.errors import NoKnowledgeBaseError
from handoff.models import (
    CodeElement,
    DocumentationBlock,
    FileResult,
    InjectOptions,
    InjectOutcome,
)
from handoff.orchestrator import Orchestrator
from handoff.service import create_app


class _StubOrchestrator:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def run_inject(self, path: str, options: InjectOptions | None = None) -> InjectOutcome:
        self.calls.append({"path": path, "options": options})
        if path == "missing":
            raise FileNotFoundError("Project path not found: missing")
        if path == "empty":
            raise NoKnowledgeBaseError(".project")
        block = DocumentationBlock(
            element=CodeElement(type="function", name="validateEmail", line=3),
            text="/**\n * Validates email addresses\n */",
        )
        result = FileResult(
            file="src/users.js",
            language="javascript",
            original_content="",
            documentation=[block],
            new_content="/**\n * Validates email addresses\n */\n",
        )
        return InjectOutcome(status="reported", results=[result], unsaved_files=["src/config.js"], preview="preview")


@pytest.fixture
def stub() -> _StubOrchestrator:
    return _StubOrchestrator()


@pytest.fixture
def client(stub: _StubOrchestrator) -> TestClient:
    return TestClient(create_app(lambda: stub))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_inject_endpoint_defaults_to_dry_run(client: TestClient, stub: _StubOrchestrator) -> None:
    response = client.post("/inject", json={"path": "repo", "files": "src/**/*.js"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "reported"
    assert data["preview"] == "preview"
    assert data["unsaved_files"] == ["src/config.js"]
    assert data["files"] == [
        {
            "file": "src/users.js",
            "language": "javascript",
            "blocks": [
                {
                    "type": "function",
                    "name": "validateEmail",
                    "line": 3,
                    "text": "/**\n * Validates email addresses\n */",
                }
            ],
        }
    ]
    options = stub.calls[0]["options"]
    assert isinstance(options, InjectOptions)
    assert options.dry_run is True
    assert options.files == "src/**/*.js"


def test_inject_endpoint_maps_missing_path_to_404(client: TestClient) -> None:
    response = client.post("/inject", json={"path": "missing"})

    assert response.status_code == 404
    assert "Project path not found" in response.json()["detail"]


def test_inject_endpoint_maps_pipeline_errors_to_400(client: TestClient) -> None:
    response = client.post("/inject", json={"path": "empty"})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "NoKnowledgeBaseError"
    assert "No Handoff documentation found" in data["detail"]


def test_inject_endpoint_writes_with_real_orchestrator(project_builder) -> None:
    project_builder.knowledge({"assumptions.md": ""})
    project_builder.write({"app.js": "function getAllOrders() {\n  return [];\n}\n"})
    client = TestClient(create_app(Orchestrator))

    response = client.post("/inject", json={"path": str(project_builder.path()), "dry_run": False})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "written"
    assert data["written"] == ["app.js"]
    assert project_builder.read("app.js").startswith("/**\n * Retrieves all items")


def test_inject_endpoint_maps_malformed_config_to_400(project_builder) -> None:
    project_builder.knowledge({"assumptions.md": ""})
    project_builder.write({".handoff.yml": "inject: [unclosed\n", "app.js": "function main() {}\n"})
    client = TestClient(create_app(Orchestrator))

    response = client.post("/inject", json={"path": str(project_builder.path())})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "ConfigError"
    assert ".handoff.yml" in data["detail"]
