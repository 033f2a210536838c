"""Password resets, sessions and invitations: the token-addressed resources."""


def test_password_reset_flow(client, store, user):
    issued = client.post("/password-reset/request", json={"email": user["email"]})
    assert issued.status_code == 200
    token = issued.json()["token"]
    assert token.startswith("reset-")
    assert store.get_password_reset(token).user_id == user["id"]

    response = client.post("/password-reset/reset", json={"token": token, "new_password": "n3w"})
    assert response.status_code == 200
    assert response.json() == {"message": "Password reset successful"}
    assert store.get_user(user["id"]).password == "n3w"

    again = client.post("/password-reset/reset", json={"token": token, "new_password": "other"})
    assert again.status_code == 400
    assert again.json()["detail"] == "Token already used"

    actions = [e["action"] for e in client.get("/audit-logs").json()]
    assert actions[-2:] == ["password.reset_requested", "password.reset"]


def test_password_reset_for_unknown_email_still_issues_token(client, store):
    issued = client.post("/password-reset/request", json={"email": "nobody@example.com"})
    assert issued.status_code == 200
    assert store.get_password_reset(issued.json()["token"]).user_id is None


def test_password_reset_wrong_token(client):
    response = client.post("/password-reset/reset", json={"token": "reset-bogus", "new_password": "x"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid reset token"


def test_password_reset_expired_token(client, clock, user):
    token = client.post("/password-reset/request", json={"email": user["email"]}).json()["token"]
    clock.advance(hours=25)

    response = client.post("/password-reset/reset", json={"token": token, "new_password": "x"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Token expired"


def test_password_reset_requires_fields(client):
    assert client.post("/password-reset/request", json={}).status_code == 400
    assert client.post("/password-reset/reset", json={"token": "reset-1"}).status_code == 400


def test_session_lifecycle_records_activity(client, user):
    created = client.post("/sessions", json={"user_id": user["id"]}, headers={"user-agent": "pytest-agent"})
    assert created.status_code == 201
    session = created.json()
    assert session["token"].startswith("session-")
    assert session["user_agent"] == "pytest-agent"
    assert session["ip_address"] == "testclient"

    assert client.get(f"/sessions/{session['token']}").json() == session
    assert [s["token"] for s in client.get(f"/sessions/user/{user['id']}").json()] == [session["token"]]

    deleted = client.delete(f"/sessions/{session['token']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Session deleted"}
    assert client.get(f"/sessions/user/{user['id']}").json() == []

    activity = client.get(f"/activity-logs/user/{user['id']}").json()
    assert [a["activity_type"] for a in activity] == ["logout", "login"]


def test_session_expiry_is_seven_days(client, clock):
    session = client.post("/sessions", json={"user_id": "user-1"}).json()
    assert session["expires_at"].startswith("2026-01-08T12:00:00")


def test_delete_unknown_session_returns_404(client):
    assert client.delete("/sessions/session-missing").status_code == 404
    assert client.get("/sessions/session-missing").status_code == 404


def _invite(client, **overrides):
    payload = {"email": "new@example.com", "team_id": "team-1", "role_id": "role-2", "invited_by": "user-1"}
    payload.update(overrides)
    response = client.post("/invitations", json=payload)
    assert response.status_code == 201
    return response.json()


def test_invitation_accept_flow(client):
    invitation = _invite(client)
    assert invitation["status"] == "pending"
    assert invitation["token"].startswith("invite-")
    assert invitation["id"].startswith("invitation-")
    assert [i["token"] for i in client.get("/invitations/pending").json()] == [invitation["token"]]

    accepted = client.post(f"/invitations/{invitation['token']}/accept")
    assert accepted.status_code == 200
    assert accepted.json() == {"message": "Invitation accepted"}

    stored = client.get(f"/invitations/{invitation['token']}").json()
    assert stored["status"] == "accepted"
    assert stored["accepted_at"] is not None
    assert client.get("/invitations/pending").json() == []

    again = client.post(f"/invitations/{invitation['token']}/accept")
    assert again.status_code == 400
    assert again.json()["detail"] == "Invitation already processed"


def test_invitation_accept_after_expiry_marks_expired(client, clock):
    invitation = _invite(client)
    clock.advance(days=8)

    # Still listed as pending until someone tries to accept it.
    assert len(client.get("/invitations/pending").json()) == 1

    response = client.post(f"/invitations/{invitation['token']}/accept")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invitation expired"

    stored = client.get(f"/invitations/{invitation['token']}").json()
    assert stored["status"] == "expired"
    assert stored.get("accepted_at") is None

    audit = client.get("/audit-logs").json()[-1]
    assert (audit["action"], audit["status"]) == ("invitation.expired", "failure")


def test_invitation_revoke(client):
    invitation = _invite(client)
    response = client.post(f"/invitations/{invitation['token']}/revoke")
    assert response.status_code == 200
    assert client.get(f"/invitations/{invitation['token']}").json()["status"] == "revoked"
    assert client.post(f"/invitations/{invitation['token']}/accept").status_code == 400


def test_unknown_invitation_returns_404(client):
    assert client.get("/invitations/invite-missing").status_code == 404
    assert client.post("/invitations/invite-missing/accept").status_code == 404
    assert client.post("/invitations/invite-missing/revoke").status_code == 404


def test_invitation_status_cannot_be_client_supplied(client):
    invitation = _invite(client, status="accepted")
    assert invitation["status"] == "pending"
