def test_ai_chat_reply(client):
    response = client.post("/api/ai-chat", json={"message": "Hello"})
    assert response.status_code == 200
    assert response.json()["reply"].startswith("Hello! I'm TreloarAI")


def test_ai_chat_without_message_falls_back(client):
    response = client.post("/api/ai-chat", json={})
    assert response.status_code == 200
    assert response.json()["reply"].startswith("I'm not sure how to help")


def test_voice_command_recognized(client):
    response = client.post("/api/voice-command", json={"transcript": "show urgent calls"})
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Showing urgent calls",
        "action": "show_urgent_calls",
        "speak": "Here are your urgent calls.",
    }


def test_voice_command_unrecognized_is_still_ok(client):
    response = client.post("/api/voice-command", json={"transcript": "play some music"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert "action" not in body
    assert "speak" not in body


def test_assistant_calls_are_metered(client):
    client.post("/api/ai-chat", json={"message": "status"})
    client.post("/api/ai-chat", json={"message": "help"})
    client.post("/api/voice-command", json={"transcript": "help"})

    usage = client.get("/api/usage").json()
    assert usage["by_type"]["ai_chat"] == {"amount": 2, "cost": 0.04}
    assert usage["by_type"]["voice_command"] == {"amount": 1, "cost": 0.01}
    assert usage["total_cost"] == 0.05


def test_credit_limit_blocks_further_chat(app_factory):
    from fastapi.testclient import TestClient

    with TestClient(app_factory(PLAN_MONTHLY_CREDIT_LIMIT=0.03)) as limited:
        assert limited.post("/api/ai-chat", json={"message": "hi"}).status_code == 200
        assert limited.post("/api/ai-chat", json={"message": "hi"}).status_code == 200

        response = limited.post("/api/ai-chat", json={"message": "hi"})
        assert response.status_code == 403
        assert response.json() == {"error": "Monthly credit limit reached", "limit": 0.03, "used": 0.04}

        # Rejected calls are not metered
        assert limited.get("/api/usage").json()["total_cost"] == 0.04
        assert limited.post("/api/voice-command", json={"transcript": "help"}).status_code == 403


def test_assistant_endpoints_accept_missing_body(client):
    chat = client.post("/api/ai-chat")
    assert chat.status_code == 200
    assert chat.json()["reply"].startswith("I'm not sure how to help")

    voice = client.post("/api/voice-command")
    assert voice.status_code == 200
    assert voice.json()["success"] is False
