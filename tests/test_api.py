import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sevalink.api import create_chatbot_router
from sevalink.orchestrator import RequestOrchestrator
from sevalink.utils.rate_limiter import RateLimiter

USER_ID = "user-1"


def _current_user_id() -> str:
    return USER_ID


@pytest.fixture
def client(request_service, chat_log):
    app = FastAPI()
    app.include_router(create_chatbot_router(
        RequestOrchestrator(request_service),
        chat_log,
        auth_dependency=_current_user_id,
        rate_limiter=RateLimiter(max_requests=1, window_seconds=60)
    ))
    return TestClient(app)


def test_text_message_creates_request(client, request_service, chat_log):
    response = client.post("/chatbot/text", json={"message": "I need O positive blood urgently"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Request created successfully"
    assert body["data"]["category"] == "blood_request"
    assert body["data"]["createdRequestId"] == "req-1"
    assert body["data"]["extractedInfo"]["bloodType"] == "O+"
    assert len(request_service.created) == 1
    assert chat_log.saved[0]["request_id"] == "req-1"
    assert chat_log.saved[0]["message_type"] == "text"


def test_follow_up_envelope(client):
    response = client.post("/chatbot/text", json={"message": "I need blood", "conversationContext": {}})

    body = response.json()
    assert body["message"] == "Need more information"
    assert body["data"]["nextExpected"] == "bloodType"
    assert body["data"]["missingInfo"] == ["bloodType"]


def test_pending_category_round_trip(client, request_service):
    first = client.post("/chatbot/text", json={"message": "I want to file a complaint"}).json()["data"]
    assert first["pendingCategory"] == "complaint"
    assert first["nextExpected"] == "complaintCategory"

    second = client.post("/chatbot/text", json={
        "message": "Public Safety",
        "conversationContext": first["conversationContext"],
        "pendingCategory": first["pendingCategory"],
    })

    assert second.status_code == 200
    assert second.json()["data"]["createdRequestId"] == "req-1"
    assert request_service.created[0].complaint_category == "Public Safety"


def test_unknown_pending_category_is_rejected(client):
    response = client.post("/chatbot/text", json={"message": "hello", "pendingCategory": "shopping"})
    assert response.status_code == 422


def test_general_envelope(client):
    body = client.post("/chatbot/text", json={"message": "hello"}).json()
    assert body["message"] == "Message processed"


@pytest.mark.parametrize("payload", [
    {"message": "   "},
    {"message": "a" * 1001},
])
def test_bad_text_is_400(client, payload):
    assert client.post("/chatbot/text", json=payload).status_code == 400


def test_voice_text_is_rate_limited(client, chat_log):
    payload = {"message": "I need blood", "confidence": 0.8, "voiceMetadata": {"duration": 3.2}}

    first = client.post("/chatbot/voice-text", json=payload)
    second = client.post("/chatbot/voice-text", json=payload)

    assert first.status_code == 200
    assert first.json()["data"]["needsVoiceResponse"] is True
    assert chat_log.saved[0]["voice_metadata"]["duration"] == 3.2
    assert second.status_code == 429


def test_detect_language_and_translate(client):
    detected = client.post("/chatbot/detect-language", json={"text": "मुझे खून चाहिए"}).json()
    assert detected["data"]["language"] == "hi"

    translated = client.post("/chatbot/translate", json={"text": "मुझे खून चाहिए"}).json()
    assert translated["data"]["translated"] == "मुझे blood need"

    assert client.post("/chatbot/translate", json={"text": " "}).status_code == 400


def test_history(client):
    client.post("/chatbot/text", json={"message": "hello"})

    body = client.get("/chatbot/history", params={"limit": 10}).json()

    assert body["data"]["messages"] == [{"type": "user", "content": "hello"}]
    assert body["data"]["limit"] == 10


def test_health(client):
    body = client.get("/chatbot/health").json()
    assert body["status"] == "healthy"
    assert body["ai_enabled"] is False
