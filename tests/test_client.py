"""The requests-style client, driven against the in-process app."""

import pytest
import requests

from identity_api_client import IdentityAPI


@pytest.fixture
def api(client):
    return IdentityAPI(base_url="http://testserver", session=client)


def test_client_user_roundtrip(api):
    created, error = api.create_user({"email": "ada@example.com", "password": "pw"})
    assert error is None
    fetched, error = api.get_user(created["id"])
    assert error is None
    assert fetched == created
    users, error = api.list_users()
    assert [u["id"] for u in users] == [created["id"]]


def test_client_reports_http_errors(api):
    data, error = api.get_user("user-missing")
    assert data is None
    assert error == {"status_code": 404, "message": "User not found"}

    members, error = api.list_team_members("team-missing")
    assert members == []
    assert error["status_code"] == 404


def test_client_team_and_permission_workflow(api):
    team, _ = api.create_team({"name": "Core"})
    api.add_team_member(team["id"], "user-1", role="admin")
    members, _ = api.list_team_members(team["id"])
    assert len(members) == 1

    grant, error = api.grant_permission("user-1", "perm-1", granted_by="user-0")
    assert error is None
    ok, error = api.revoke_permission("user-1", "perm-1")
    assert ok and error is None
    ok, error = api.revoke_permission("user-1", "perm-1")
    assert not ok
    assert error["status_code"] == 404

    logs, _ = api.list_audit_logs(limit=2)
    assert [entry["action"] for entry in logs] == ["permission.granted", "permission.revoked"]


def test_client_token_workflows(api):
    session, _ = api.create_session("user-1")
    ok, _ = api.delete_session(session["token"])
    assert ok

    invitation, _ = api.create_invitation({"email": "new@example.com"})
    result, error = api.accept_invitation(invitation["token"])
    assert error is None
    assert result == {"message": "Invitation accepted"}

    issued, _ = api.request_password_reset("nobody@example.com")
    _, error = api.reset_password(issued["token"], "pw")
    assert error is None


def test_client_transport_errors_are_returned(monkeypatch):
    session = requests.Session()

    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(session, "request", refuse)
    api = IdentityAPI(base_url="http://localhost:1", session=session)

    data, error = api.get_user("user-1")

    assert data is None
    assert error == {"status_code": None, "message": "connection refused"}
