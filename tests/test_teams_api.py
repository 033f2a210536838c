def _create_team(client, owner_id="user-owner"):
    response = client.post("/teams", json={"name": "Platform", "owner_id": owner_id, "member_count": 9})
    assert response.status_code == 201
    return response.json()


def test_create_team_starts_with_no_members(client):
    team = _create_team(client)
    assert team["id"].startswith("team-")
    assert team["member_count"] == 0
    assert client.get(f"/teams/{team['id']}").json() == team
    assert [t["id"] for t in client.get("/teams").json()] == [team["id"]]


def test_team_creation_is_audited_by_owner(client):
    team = _create_team(client, owner_id="user-42")
    entry = client.get("/audit-logs").json()[-1]
    assert entry["action"] == "team.created"
    assert entry["user_id"] == "user-42"
    assert entry["resource_id"] == team["id"]


def test_member_count_matches_member_list(client):
    team = _create_team(client)
    for user_id, role in [("user-1", "admin"), ("user-2", "member"), ("user-3", "viewer")]:
        response = client.post(f"/teams/{team['id']}/members", json={"user_id": user_id, "role": role})
        assert response.status_code == 201
        assert response.json()["team_id"] == team["id"]

    members = client.get(f"/teams/{team['id']}/members").json()
    refreshed = client.get(f"/teams/{team['id']}").json()

    assert [m["user_id"] for m in members] == ["user-1", "user-2", "user-3"]
    assert refreshed["member_count"] == len(members) == 3


def test_invalid_member_role_is_rejected(client):
    team = _create_team(client)
    response = client.post(f"/teams/{team['id']}/members", json={"user_id": "user-1", "role": "owner"})
    assert response.status_code == 400


def test_unknown_team_returns_404(client):
    assert client.get("/teams/team-404").status_code == 404
    assert client.get("/teams/team-404/members").status_code == 404
    response = client.post("/teams/team-404/members", json={"user_id": "user-1"})
    assert response.status_code == 404
