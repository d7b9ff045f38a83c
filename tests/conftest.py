"""Shared fixtures for tests."""

import json

import pytest

from suitegen.agent.client import AgentReply, ReplayAgentClient
from suitegen.orchestration.orchestrator import GenerationOrchestrator
from suitegen.orchestration.progress import ProgressAnnouncer
from suitegen.schema.normalizer import normalize


@pytest.fixture
def full_payload() -> dict:
    """Return an agent payload with every section present."""
    return {
        "repository_info": {
            "name": "octo/widgets",
            "languages": "Python",
            "structure_summary": "A widget library with a REST API.",
        },
        "unit_tests": {
            "title": "Unit Tests - Widgets",
            "test_count": "3",
            "code": "def test_widget():\n    assert Widget().ok",
            "summary": "Covers the **Widget** model.",
        },
        "integration_tests": {
            "title": "Integration Tests - API",
            "test_count": "2",
            "code": "def test_api(client):\n    assert client.get('/').status_code == 200",
            "summary": "Exercises the API.",
        },
        "e2e_tests": {
            "title": "E2E Tests",
            "test_count": "1",
            "code": "def test_flow(page):\n    page.goto('/')",
            "summary": "Browser flow.",
        },
        "edge_case_tests": {
            "title": "Edge Cases",
            "test_count": "4",
            "code": "def test_empty():\n    assert Widget('').ok is False",
            "summary": "Boundary values.",
        },
        "performance_tests": {
            "title": "Performance",
            "test_count": "1",
            "code": "def test_fast(benchmark):\n    benchmark(Widget)",
            "summary": "Latency budget.",
        },
        "overall_summary": "Generated 11 tests for octo/widgets.",
    }


@pytest.fixture
def unit_only_payload() -> dict:
    """Return an agent payload with only the unit section."""
    return {
        "repository_info": {"name": "octo/widgets"},
        "unit_tests": {
            "title": "Unit Tests",
            "test_count": "3",
            "code": "def test_one():\n    pass",
            "summary": "Three tests.",
        },
        "overall_summary": "Unit tests only.",
    }


@pytest.fixture
def full_payload_json(full_payload) -> str:
    return json.dumps(full_payload)


@pytest.fixture
def full_result(full_payload):
    return normalize(full_payload)


@pytest.fixture
def announcer() -> ProgressAnnouncer:
    """Return an announcer with a short interval."""
    return ProgressAnnouncer(interval=0.01)


@pytest.fixture
def replay_client(full_payload_json) -> ReplayAgentClient:
    return ReplayAgentClient(full_payload_json)


@pytest.fixture
def orchestrator(replay_client, announcer) -> GenerationOrchestrator:
    return GenerationOrchestrator(replay_client, announcer=announcer)


class ScriptedClient:
    """Agent client returning a fixed reply, optionally waiting on a gate."""

    def __init__(self, reply: AgentReply, gate=None):
        self.reply = reply
        self.gate = gate
        self.calls: list[tuple[str, str]] = []

    async def call(self, message: str, agent_id: str) -> AgentReply:
        self.calls.append((message, agent_id))
        if self.gate is not None:
            await self.gate.wait()
        return self.reply


@pytest.fixture
def scripted_client():
    """Factory for ScriptedClient."""
    return ScriptedClient
