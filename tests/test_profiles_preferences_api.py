def test_profile_create_get_update(client, user):
    created = client.post("/profiles", json={"user_id": user["id"], "bio": "Mathematician"})
    assert created.status_code == 201
    profile = created.json()
    assert profile["id"].startswith("profile-")

    assert client.get(f"/profiles/user/{user['id']}").json() == profile

    updated = client.put(f"/profiles/user/{user['id']}", json={"bio": "Programmer", "company": "Analytical"})
    assert updated.status_code == 200
    body = updated.json()
    assert body["id"] == profile["id"]
    assert body["user_id"] == user["id"]
    assert body["bio"] == "Programmer"
    assert body["location"] == ""


def test_profile_missing_returns_404(client):
    assert client.get("/profiles/user/user-none").status_code == 404
    assert client.put("/profiles/user/user-none", json={"bio": "x"}).status_code == 404


def test_profile_changes_are_audited(client, user):
    client.post("/profiles", json={"user_id": user["id"]})
    client.put(f"/profiles/user/{user['id']}", json={"bio": "new"})
    actions = [e["action"] for e in client.get("/audit-logs").json()]
    assert actions[-2:] == ["profile.created", "profile.updated"]


def test_preferences_create_get_update(client):
    created = client.post(
        "/preferences",
        json={"user_id": "user-1", "theme": "dark", "notifications": {"email": True}, "settings": {"density": 2}},
    )
    assert created.status_code == 201
    prefs = created.json()
    assert prefs["id"].startswith("pref-")
    assert client.get("/preferences/user/user-1").json() == prefs

    updated = client.put("/preferences/user/user-1", json={"theme": "light", "language": "de"})
    assert updated.status_code == 200
    body = updated.json()
    assert body["id"] == prefs["id"]
    assert body["theme"] == "light"
    assert body["notifications"] == {}


def test_preferences_post_replaces_existing(client):
    client.post("/preferences", json={"user_id": "user-1", "theme": "dark"})
    second = client.post("/preferences", json={"user_id": "user-1", "theme": "light"}).json()
    assert client.get("/preferences/user/user-1").json() == second


def test_preferences_invalid_theme_and_missing(client):
    assert client.post("/preferences", json={"user_id": "user-1", "theme": "neon"}).status_code == 400
    assert client.get("/preferences/user/user-2").status_code == 404
    assert client.put("/preferences/user/user-2", json={"theme": "dark"}).status_code == 404
