def _make_users(client, count):
    for i in range(count):
        assert client.post("/users", json={"email": f"u{i}@example.com"}).status_code == 201


def test_audit_logs_limit_returns_latest_window(client):
    _make_users(client, 10)

    window = client.get("/audit-logs", params={"limit": 3}).json()
    everything = client.get("/audit-logs").json()

    assert len(everything) == 10
    assert window == everything[-3:]


def test_audit_logs_default_and_unparsable_limit(client):
    _make_users(client, 55)
    assert len(client.get("/audit-logs").json()) == 50
    assert len(client.get("/audit-logs", params={"limit": "lots"}).json()) == 50
    assert client.get("/audit-logs", params={"limit": -1}).json() == []


def test_activity_log_create_and_list_newest_first(client):
    for i in range(4):
        response = client.post(
            "/activity-logs",
            json={"user_id": "user-1", "activity_type": "view", "description": f"page {i}", "metadata": {"n": i}},
        )
        assert response.status_code == 201
        assert response.json()["ip_address"] == "testclient"
    client.post("/activity-logs", json={"user_id": "user-2", "activity_type": "edit"})

    logs = client.get("/activity-logs/user/user-1", params={"limit": 3}).json()

    assert [entry["description"] for entry in logs] == ["page 3", "page 2", "page 1"]


def test_activity_log_requires_activity_type(client):
    assert client.post("/activity-logs", json={"user_id": "user-1"}).status_code == 400
