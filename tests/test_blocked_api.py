def test_seeded_blocked_numbers(client):
    blocked = client.get("/api/blocked").json()
    assert {item["phone_number"]: item["attempts"] for item in blocked} == {
        "+1800SPAM99": 5,
        "+1999ROBO00": 3,
    }


def test_block_number_starts_with_one_attempt(client):
    response = client.post("/api/blocked", json={"phone_number": "+15557770000", "reason": "Scam"})
    assert response.status_code == 200
    assert response.json()["message"] == "Number blocked successfully"

    newest = client.get("/api/blocked").json()[0]
    assert newest["phone_number"] == "+15557770000"
    assert newest["reason"] == "Scam"
    assert newest["attempts"] == 1


def test_client_cannot_set_attempts(client):
    client.post("/api/blocked", json={"phone_number": "+15557770001", "attempts": 40})
    assert client.get("/api/blocked").json()[0]["attempts"] == 1


def test_unblock_is_idempotent(client):
    blocked_id = client.post("/api/blocked", json={"phone_number": "+15557770002"}).json()["id"]

    for _ in range(2):
        response = client.delete(f"/api/blocked/{blocked_id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Number unblocked successfully"}

    assert blocked_id not in {item["id"] for item in client.get("/api/blocked").json()}


def test_block_without_body(client):
    response = client.post("/api/blocked")
    assert response.status_code == 200
    newest = client.get("/api/blocked").json()[0]
    assert newest["phone_number"] is None
    assert newest["attempts"] == 1


def test_unblock_non_numeric_id(client):
    response = client.delete("/api/blocked/not-an-id")
    assert response.status_code == 200
    assert response.json() == {"message": "Number unblocked successfully"}
    assert len(client.get("/api/blocked").json()) == 2
