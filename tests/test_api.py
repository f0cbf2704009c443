"""
Tests for the HTTP API routes.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from site_assistant.application.ports.llm import CompletionPort
from site_assistant.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from site_assistant.application.use_cases.submit_contact import SubmitContactUseCase
from site_assistant.infrastructure.classifier.rule_based_classifier import RuleBasedMessageClassifier
from site_assistant.infrastructure.knowledge.file_kb import FileKnowledgeBase
from site_assistant.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from site_assistant.infrastructure.store.memory_store import MemorySessionStore
from site_assistant.infrastructure.webhook.contact_webhook import UnconfiguredContactNotifier
from site_assistant.main import app
from site_assistant.wiring.dependencies import get_chat_use_case, get_contact_use_case


class EchoCompletion(CompletionPort):
    def complete(self, system_prompt, messages):
        return f"Du skrev: {messages[-1].content}"


def _client() -> TestClient:
    use_case = HandleChatMessageUseCase(
        store=MemorySessionStore(),
        kb=FileKnowledgeBase(),
        classifier=RuleBasedMessageClassifier(),
        completion=EchoCompletion(),
        catalog=ServiceCatalogStore(),
    )
    app.dependency_overrides[get_chat_use_case] = lambda: use_case
    app.dependency_overrides[get_contact_use_case] = lambda: SubmitContactUseCase(
        notifier=UnconfiguredContactNotifier(),
        routing_id="12345",
    )
    return TestClient(app)


def test_health():
    assert _client().get("/health").json() == {"status": "ok"}


def test_chat_flow():
    client = _client()
    created = client.post("/api/v1/chat/sessions", json={})
    assert created.status_code == 200
    session_id = created.json()["session_id"]
    assert created.json()["messages"][0]["role"] == "assistant"

    reply = client.post(f"/api/v1/chat/sessions/{session_id}/messages", json={"message": "Hej! Vad kostar en hemsida?"})
    assert reply.status_code == 200
    body = reply.json()
    assert body["reply"] == "Du skrev: Hej! Vad kostar en hemsida?"
    assert body["language"] == "sv"
    assert body["analysis"]["stage"] == "interested"
    assert body["booking"]["should_show"] is False

    history = client.get(f"/api/v1/chat/sessions/{session_id}/messages").json()
    assert len(history["messages"]) == 3


def test_security_status_and_reset():
    client = _client()
    session_id = client.post("/api/v1/chat/sessions", json={}).json()["session_id"]
    blocked = client.post(f"/api/v1/chat/sessions/{session_id}/messages", json={"message": "idiot"}).json()
    assert blocked["blocked"] is True

    status = client.get(f"/api/v1/chat/sessions/{session_id}/security").json()
    assert status == {"violations": 1, "off_topic_attempts": 0}

    reset = client.post(f"/api/v1/chat/sessions/{session_id}/security/reset").json()
    assert reset == {"violations": 0, "off_topic_attempts": 0}


def test_unknown_session_is_404():
    client = _client()
    assert client.get("/api/v1/chat/sessions/missing/messages").status_code == 404
    assert client.post("/api/v1/chat/sessions/missing/messages", json={"message": "Hej"}).status_code == 404


def test_blank_message_is_400():
    client = _client()
    session_id = client.post("/api/v1/chat/sessions", json={}).json()["session_id"]
    assert client.post(f"/api/v1/chat/sessions/{session_id}/messages", json={"message": "  "}).status_code == 400


def test_contact_validation_and_delivery_errors():
    client = _client()
    invalid = client.post("/api/v1/contact", json={"email": "nope"})
    assert invalid.status_code == 400

    failed = client.post("/api/v1/contact", json={"email": "anna@example.se"})
    assert failed.status_code == 502
    assert failed.json()["detail"] == "Något gick fel. Försök igen eller kontakta oss direkt."
