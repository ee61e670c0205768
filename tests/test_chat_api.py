from creditportal.core.messages import AI_ASSISTANT_NAME, ESCALATION_NOTICE, SYSTEM_SENDER_NAME
from creditportal.services.ai_service import ResponderResult

from tests.conftest import auth_headers


def test_messages_require_authentication(client):
    assert client.get("/api/chat/messages").status_code == 401
    assert client.post("/api/chat/messages", json={"message": "hi"}).status_code == 401


def test_invalid_token_is_rejected(client):
    response = client.get("/api/chat/messages", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_post_returns_the_stored_user_message(client, fake_responder):
    response = client.post(
        "/api/chat/messages",
        json={"message": "How do I dispute a late payment?"},
        headers=auth_headers("member-1"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "How do I dispute a late payment?"
    assert body["userId"] == "member-1"
    assert body["isFromTeam"] is False
    assert body["teamMemberName"] is None
    assert isinstance(body["id"], int)
    assert fake_responder.calls == [("How do I dispute a late payment?", None)]


def test_history_returns_both_messages_oldest_first(client):
    headers = auth_headers("member-1")
    for text in ("first question", "second question"):
        client.post("/api/chat/messages", json={"message": text}, headers=headers)

    response = client.get("/api/chat/messages", headers=headers)

    assert response.status_code == 200
    messages = response.json()
    assert len(messages) == 4
    assert [m["isFromTeam"] for m in messages] == [False, True, False, True]
    assert messages[0]["message"] == "first question"
    assert messages[1]["teamMemberName"] == AI_ASSISTANT_NAME
    timestamps = [m["timestamp"] for m in messages]
    assert timestamps == sorted(timestamps)


def test_history_respects_limit_and_owner(client):
    client.post("/api/chat/messages", json={"message": "mine"}, headers=auth_headers("member-1"))
    client.post("/api/chat/messages", json={"message": "not mine"}, headers=auth_headers("member-2"))

    response = client.get("/api/chat/messages?limit=1", headers=auth_headers("member-1"))

    messages = response.json()
    assert len(messages) == 1
    assert messages[0]["userId"] == "member-1"
    assert messages[0]["isFromTeam"] is True


def test_empty_message_is_a_client_error(client):
    response = client.post("/api/chat/messages", json={"message": "   "}, headers=auth_headers())

    assert response.status_code == 400
    assert response.json()["detail"]


def test_malformed_body_is_rejected(client):
    response = client.post("/api/chat/messages", json={"text": "hi"}, headers=auth_headers())

    assert response.status_code == 422


def test_responder_failure_still_answers_200_with_escalation(client, fake_responder):
    fake_responder.error = "simulated network failure"
    headers = auth_headers("member-9")

    response = client.post("/api/chat/messages", json={"message": "Where is my refund?"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Where is my refund?"
    follow_up = client.get("/api/chat/messages", headers=headers).json()[-1]
    assert follow_up["teamMemberName"] == SYSTEM_SENDER_NAME
    assert follow_up["message"] == ESCALATION_NOTICE


def test_escalated_message_stores_notice(client, fake_responder):
    fake_responder.result = ResponderResult("Billing will call you.", "escalate", 0.9)
    headers = auth_headers()

    client.post("/api/chat/messages", json={"message": "I want a refund on last month's charge"}, headers=headers)

    follow_up = client.get("/api/chat/messages", headers=headers).json()[-1]
    assert follow_up["message"] == ESCALATION_NOTICE


def test_sentiment_endpoint(client):
    response = client.post("/api/chat/sentiment", json={"message": "Thanks, this helps!"}, headers=auth_headers())

    assert response.status_code == 200
    assert response.json() == {"sentiment": "positive", "score": 0.8}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
