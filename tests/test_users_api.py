import re

from identity_api.app.core.exceptions import StoreError


def test_create_user_assigns_server_fields(client, user):
    assert re.fullmatch(r"user-[0-9a-f]{16}", user["id"])
    assert user["is_active"] is True
    assert user["email"] == "ada@example.com"
    assert user["created_at"] is not None
    assert "password" not in user


def test_get_and_list_users_never_expose_password(client, user):
    fetched = client.get(f"/users/{user['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == user

    listed = client.get("/users").json()
    assert [u["id"] for u in listed] == [user["id"]]
    assert all("password" not in u for u in listed)


def test_get_unknown_user_returns_404(client):
    response = client.get("/users/user-0000000000000000")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_update_user_replaces_fields_and_audits(client, user):
    response = client.put(
        f"/users/{user['id']}",
        json={"email": "ada@new.example.com", "username": "ada", "is_active": False},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user["id"]
    assert body["email"] == "ada@new.example.com"
    assert body["role_id"] == ""
    assert body["is_active"] is False
    assert body["created_at"] == user["created_at"]

    actions = [entry["action"] for entry in client.get("/audit-logs").json()]
    assert actions == ["user.created", "user.updated"]


def test_update_unknown_user_returns_404(client):
    response = client.put("/users/user-missing", json={"email": "x@example.com"})
    assert response.status_code == 404


def test_create_user_is_audited_with_caller_origin(client, user):
    entry = client.get("/audit-logs").json()[-1]
    assert entry["action"] == "user.created"
    assert entry["user_id"] == user["id"]
    assert entry["resource_id"] == user["id"]
    assert entry["resource_type"] == "user"
    assert entry["status"] == "success"
    assert entry["ip_address"] == "testclient"


def test_malformed_json_is_rejected_with_400(client, store):
    response = client.post("/users", content="{not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid request"}
    assert store.list_users() == []


def test_wrongly_typed_payload_is_rejected_with_400(client):
    response = client.post("/users", json={"email": ["not", "a", "string"]})
    assert response.status_code == 400


def test_audit_failure_does_not_fail_creation(client, store, monkeypatch):
    def broken_append(entry):
        raise RuntimeError("audit log unavailable")

    monkeypatch.setattr(store, "append_audit", broken_append)

    response = client.post("/users", json={"email": "grace@example.com"})

    assert response.status_code == 201
    assert store.get_user(response.json()["id"]).email == "grace@example.com"


def test_unexpected_store_error_maps_to_500(client, store, monkeypatch):
    def broken_list():
        raise StoreError("store unavailable")

    monkeypatch.setattr(store, "list_users", broken_list)

    response = client.get("/users")
    assert response.status_code == 500
    assert response.json()["detail"] == "store unavailable"


def test_roles_are_seeded_and_creatable(client):
    seeded = {role["id"]: role for role in client.get("/roles").json()}
    assert seeded["role-1"]["name"] == "Admin"
    assert seeded["role-1"]["permissions"] == ["*"]
    assert seeded["role-2"]["name"] == "User"

    created = client.post("/roles", json={"name": "Auditor", "permissions": ["users.read"]})
    assert created.status_code == 201
    role = created.json()
    assert role["id"].startswith("role-")
    assert client.get(f"/roles/{role['id']}").json() == role


def test_create_role_requires_name(client):
    assert client.post("/roles", json={"permissions": []}).status_code == 400


def test_get_unknown_role_returns_404(client):
    assert client.get("/roles/role-404").status_code == 404
