from datetime import datetime


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


CALL = {
    "phone_number": "+1555TEST01",
    "caller_name": "Test Caller",
    "call_type": "incoming",
    "duration": 42,
    "urgency_level": "medium",
    "status": "handled",
    "ai_action": "processed",
}


def test_record_call(client):
    response = client.post("/api/call-history", json=CALL)
    assert response.status_code == 200
    assert response.json()["message"] == "Call recorded successfully"

    newest = client.get("/api/call-history").json()[0]
    assert newest["id"] == response.json()["id"]
    for key, value in CALL.items():
        assert newest[key] == value


def test_client_timestamp_is_ignored(client):
    client.post("/api/call-history", json={**CALL, "timestamp": "1999-01-01T00:00:00Z"})
    newest = client.get("/api/call-history").json()[0]
    assert _parse(newest["timestamp"]).year != 1999


def test_history_is_capped_at_fifty_newest_first(client):
    for index in range(55):
        client.post("/api/call-history", json={**CALL, "caller_name": f"Caller {index}"})

    calls = client.get("/api/call-history").json()
    assert len(calls) == 50
    assert calls[0]["caller_name"] == "Caller 54"

    keys = [(_parse(call["timestamp"]), call["id"]) for call in calls]
    assert keys == sorted(keys, reverse=True)
    assert len({call["id"] for call in calls}) == 50


def test_recording_a_call_is_metered(client):
    client.post("/api/call-history", json=CALL)
    usage = client.get("/api/usage").json()
    assert usage["by_type"]["call_screening"]["amount"] == 1


def test_record_call_without_body(client):
    response = client.post("/api/call-history")
    assert response.status_code == 200
    newest = client.get("/api/call-history").json()[0]
    assert newest["id"] == response.json()["id"]
    assert newest["duration"] is None
    assert newest["urgency_level"] is None


def test_fractional_duration_is_rejected(client):
    response = client.post("/api/call-history", json={**CALL, "duration": 12.5})
    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request"
    assert all(call["caller_name"] != "Test Caller" for call in client.get("/api/call-history").json())
