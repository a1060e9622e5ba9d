from __future__ import annotations

from fastapi.testclient import TestClient

from medassist.apps.api import deps
from medassist.apps.api.main import app


def test_chat_message_is_pending_then_answered() -> None:
    deps.reset_caches()

    with TestClient(app) as client:
        session_id = client.post("/sessions").json()["session_id"]

        response = client.post(f"/sessions/{session_id}/chat", json={"text": "hello"})
        assert response.status_code == 202
        payload = response.json()
        assert payload["record"]["status"] == "pending"
        assert payload["record"]["payload"] == "hello"
        assert payload["record"]["language"] == "en"
        assert [item["id"] for item in payload["chat"]] == [payload["record"]["id"]]

        deps.get_scheduler_service().advance(1.0)

        chat = client.get(f"/sessions/{session_id}/chat").json()
        assert [item["sender"] for item in chat] == ["user", "ai"]
        assert [item["status"] for item in chat] == ["complete", "complete"]
        assert chat[1]["payload"] == "I understand your concern. Let me help you with that..."
        assert chat[1]["reply_to"] == payload["record"]["id"]


def test_chat_rejects_blank_text_and_unknown_language() -> None:
    deps.reset_caches()

    with TestClient(app) as client:
        session_id = client.post("/sessions").json()["session_id"]

        blank = client.post(f"/sessions/{session_id}/chat", json={"text": "   "})
        assert blank.status_code == 422

        unknown = client.post(f"/sessions/{session_id}/chat", json={"text": "bonjour", "language": "fr"})
        assert unknown.status_code == 422
        assert "unsupported language" in unknown.json()["detail"]

        assert client.get(f"/sessions/{session_id}/chat").json() == []


def test_chat_unknown_session_is_404() -> None:
    deps.reset_caches()

    with TestClient(app) as client:
        response = client.post("/sessions/nope/chat", json={"text": "hello"})
        assert response.status_code == 404
        assert client.get("/sessions/nope/chat").status_code == 404
