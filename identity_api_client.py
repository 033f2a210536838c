"""Identity API client.

This module defines a thin client wrapper around the Identity API's
REST surface.  It uses the ``requests`` library internally to make HTTP
calls; any object with a compatible ``request`` method (for example a
``requests.Session`` or a test client) can be supplied instead.

Every high-level method returns a tuple ``(data, error)``:

* on success ``data`` holds the decoded JSON body and ``error`` is
  ``None``;
* on failure ``data`` is ``None`` (or an empty list for listing
  methods) and ``error`` is a dictionary with the keys ``status_code``
  and ``message``.

The client never raises for HTTP or transport errors, which keeps
calling code such as bots and scripts simple.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]
ListResult = Tuple[List[Dict[str, Any]], Optional[Error]]


class IdentityAPI:
    """Client for interacting with the Identity API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") or err_json.get("message") or str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> ListResult:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Users and roles
    # ------------------------------------------------------------------
    def create_user(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/users", json_body=payload)

    def list_users(self) -> ListResult:
        return self._list("/users")

    def get_user(self, user_id: str) -> Result:
        return self._request("GET", f"/users/{user_id}")

    def update_user(self, user_id: str, payload: Dict[str, Any]) -> Result:
        """Replace a user; omitted fields fall back to their defaults."""
        return self._request("PUT", f"/users/{user_id}", json_body=payload)

    def create_role(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/roles", json_body=payload)

    def list_roles(self) -> ListResult:
        return self._list("/roles")

    def get_role(self, role_id: str) -> Result:
        return self._request("GET", f"/roles/{role_id}")

    # ------------------------------------------------------------------
    # Profiles and preferences
    # ------------------------------------------------------------------
    def create_profile(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/profiles", json_body=payload)

    def get_profile(self, user_id: str) -> Result:
        return self._request("GET", f"/profiles/user/{user_id}")

    def update_profile(self, user_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/profiles/user/{user_id}", json_body=payload)

    def set_preferences(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/preferences", json_body=payload)

    def get_preferences(self, user_id: str) -> Result:
        return self._request("GET", f"/preferences/user/{user_id}")

    def update_preferences(self, user_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/preferences/user/{user_id}", json_body=payload)

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def create_team(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/teams", json_body=payload)

    def list_teams(self) -> ListResult:
        return self._list("/teams")

    def get_team(self, team_id: str) -> Result:
        return self._request("GET", f"/teams/{team_id}")

    def add_team_member(self, team_id: str, user_id: str, role: str = "member") -> Result:
        return self._request(
            "POST", f"/teams/{team_id}/members", json_body={"user_id": user_id, "role": role}
        )

    def list_team_members(self, team_id: str) -> ListResult:
        return self._list(f"/teams/{team_id}/members")

    # ------------------------------------------------------------------
    # Logs
    # ------------------------------------------------------------------
    def list_audit_logs(self, limit: Optional[int] = None) -> ListResult:
        params = {"limit": limit} if limit is not None else None
        return self._list("/audit-logs", params=params)

    def record_activity(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/activity-logs", json_body=payload)

    def list_user_activity(self, user_id: str, limit: Optional[int] = None) -> ListResult:
        params = {"limit": limit} if limit is not None else None
        return self._list(f"/activity-logs/user/{user_id}", params=params)

    # ------------------------------------------------------------------
    # Password resets and sessions
    # ------------------------------------------------------------------
    def request_password_reset(self, email: str) -> Result:
        """Ask for a reset token.  ``data["token"]`` holds the token."""
        return self._request("POST", "/password-reset/request", json_body={"email": email})

    def reset_password(self, token: str, new_password: str) -> Result:
        return self._request(
            "POST",
            "/password-reset/reset",
            json_body={"token": token, "new_password": new_password},
        )

    def create_session(self, user_id: str) -> Result:
        return self._request("POST", "/sessions", json_body={"user_id": user_id})

    def get_session(self, token: str) -> Result:
        return self._request("GET", f"/sessions/{token}")

    def list_user_sessions(self, user_id: str) -> ListResult:
        return self._list(f"/sessions/user/{user_id}")

    def delete_session(self, token: str) -> Tuple[bool, Optional[Error]]:
        """Delete a session.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/sessions/{token}")
        return error is None, error

    # ------------------------------------------------------------------
    # Invitations
    # ------------------------------------------------------------------
    def create_invitation(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/invitations", json_body=payload)

    def get_invitation(self, token: str) -> Result:
        return self._request("GET", f"/invitations/{token}")

    def list_pending_invitations(self) -> ListResult:
        return self._list("/invitations/pending")

    def accept_invitation(self, token: str) -> Result:
        return self._request("POST", f"/invitations/{token}/accept")

    def revoke_invitation(self, token: str) -> Result:
        return self._request("POST", f"/invitations/{token}/revoke")

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------
    def list_permissions(self) -> ListResult:
        return self._list("/permissions")

    def get_permission(self, permission_id: str) -> Result:
        return self._request("GET", f"/permissions/{permission_id}")

    def create_permission(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/permissions", json_body=payload)

    def grant_permission(self, user_id: str, permission_id: str, granted_by: str = "") -> Result:
        return self._request(
            "POST",
            f"/users/{user_id}/permissions",
            json_body={"permission_id": permission_id, "granted_by": granted_by},
        )

    def list_user_permissions(self, user_id: str) -> ListResult:
        return self._list(f"/users/{user_id}/permissions")

    def revoke_permission(self, user_id: str, permission_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/users/{user_id}/permissions/{permission_id}")
        return error is None, error
