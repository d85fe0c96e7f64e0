import json

import pytest
from fastapi.testclient import TestClient

from talent_scout.domain.entities import Persona
from talent_scout.domain.exceptions import GenerationError, InvalidUsernameError, SchemaValidationError
from talent_scout.interface.app import create_app
from talent_scout.interface.dependencies import get_use_case
from talent_scout.interface.schemas import AssessmentRequest
from talent_scout.services.assess_profile import AssessProfileUseCase

SSE = {"Accept": "text/event-stream"}


@pytest.fixture
def use_case(fake_source, fake_llm) -> AssessProfileUseCase:
    return AssessProfileUseCase(fake_source, fake_llm, strict_user_probe=True)


@pytest.fixture
def client(use_case) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: use_case
    # Not entered as a context manager, so the lifespan (real clients) never runs.
    return TestClient(app, raise_server_exceptions=False)


def _events(body: str) -> list[dict]:
    return [json.loads(line.removeprefix("data: ")) for line in body.split("\n\n") if line.startswith("data: ")]


def test_request_defaults():
    request = AssessmentRequest.model_validate({"username": "octocat"})

    assert request.personality is Persona.PUBLIC_HEALTH_RECRUITER
    assert request.intensity == 3


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "ok"
    assert body["service"] == "talent-scout"
    assert body["personas"] == [persona.value for persona in Persona]


class TestCall:
    def test_returns_result(self, client, fake_llm):
        response = client.post("/assess", json={"data": {"username": "octocat"}})

        assert response.status_code == 200
        assert response.json() == {"result": "".join(fake_llm.chunks)}
        assert fake_llm.calls[0]["temperature"] == 0.7

    def test_passes_persona_and_intensity(self, client, fake_llm):
        response = client.post(
            "/assess",
            json={"data": {"username": "  octocat ", "personality": "epidemiologist", "intensity": 1}},
        )

        assert response.status_code == 200
        assert fake_llm.calls[0]["temperature"] == 0.3
        assert 'GitHub username: "octocat"' in fake_llm.calls[0]["prompt"]

    @pytest.mark.parametrize(
        "data",
        [
            {"username": "octocat", "intensity": 0},
            {"username": "octocat", "intensity": 6},
            {"username": "octocat", "personality": "pirate"},
            {"username": "   "},
            {"username": "../user"},
            {"username": "octo/cat"},
            {"username": "octocat?admin=1"},
            {},
        ],
    )
    def test_rejects_invalid_arguments(self, client, fake_llm, data):
        response = client.post("/assess", json={"data": data})

        assert response.status_code == 400
        assert response.json()["error"]["status"] == "INVALID_ARGUMENT"
        assert fake_llm.calls == []

    def test_requires_data_envelope(self, client):
        response = client.post("/assess", json={"username": "octocat"})

        assert response.status_code == 400

    def test_upstream_error(self, client, fake_source):
        fake_source.probe_status = 500

        response = client.post("/assess", json={"data": {"username": "octocat"}})

        assert response.status_code == 502
        assert response.json()["error"]["status"] == "UNAVAILABLE"

    def test_schema_error(self, client, fake_source, fake_llm):
        fake_source.error = SchemaValidationError("Unexpected GitHub repository list shape")
        fake_llm.tool_requests = [("fetchGithubRepos", {"username": "octocat"})]

        response = client.post("/assess", json={"data": {"username": "octocat"}})

        assert response.status_code == 502
        assert response.json() == {
            "error": {"status": "INTERNAL", "message": "Unexpected GitHub repository list shape"}
        }

    def test_invalid_username_from_tool_call_maps_to_400(self, client, fake_source, fake_llm):
        fake_source.error = InvalidUsernameError("Invalid GitHub username: '../user'.")
        fake_llm.tool_requests = [("fetchGithubRepos", {"username": "../user"})]

        response = client.post("/assess", json={"data": {"username": "octocat"}})

        assert response.status_code == 400
        assert response.json()["error"]["status"] == "INVALID_ARGUMENT"

    def test_unexpected_error_is_hidden(self, client, fake_source, fake_llm):
        fake_source.error = KeyError("secret detail")
        fake_llm.tool_requests = [("fetchGithubRepos", {"username": "octocat"})]

        response = client.post("/assess", json={"data": {"username": "octocat"}})

        assert response.status_code == 500
        assert response.json()["error"]["status"] == "INTERNAL"
        assert "secret detail" not in response.text


class TestStreaming:
    def test_streams_messages_then_result(self, client, fake_llm):
        response = client.post("/assess", json={"data": {"username": "octocat"}}, headers=SSE)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        events = _events(response.text)
        assert events[:-1] == [{"message": chunk} for chunk in fake_llm.chunks]
        assert events[-1] == {"result": "".join(fake_llm.chunks)}

    def test_not_found_streams_short_reply(self, client, fake_source, fake_llm):
        fake_source.probe_status = 404

        response = client.post("/assess", json={"data": {"username": "ghost"}}, headers=SSE)

        events = _events(response.text)
        assert events[-1]["result"]
        assert fake_llm.calls[0]["tools"] == []

    def test_failure_becomes_error_event(self, client, fake_source, fake_llm):
        fake_source.error = GenerationError("LLM call failed: overloaded")
        fake_llm.tool_requests = [("fetchLanguageStats", {"username": "octocat"})]

        response = client.post("/assess", json={"data": {"username": "octocat"}}, headers=SSE)

        assert response.status_code == 200
        assert _events(response.text) == [
            {"error": {"status": "INTERNAL", "message": "LLM call failed: overloaded"}}
        ]
