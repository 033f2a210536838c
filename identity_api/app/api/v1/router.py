"""
Top-level router for version 1 of the API.

This router aggregates the domain-specific routers (users, teams,
invitations, etc.).  When new domains are introduced, update this file
to include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    activity,
    audit,
    invitations,
    password_reset,
    permissions,
    preferences,
    profiles,
    roles,
    sessions,
    teams,
    users,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(roles.router, prefix="/roles", tags=["roles"])
router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(audit.router, prefix="/audit-logs", tags=["audit"])
router.include_router(password_reset.router, prefix="/password-reset", tags=["password-reset"])
router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
router.include_router(activity.router, prefix="/activity-logs", tags=["activity"])
router.include_router(invitations.router, prefix="/invitations", tags=["invitations"])
# The permissions router serves both "/permissions" and
# "/users/{user_id}/permissions", so it defines full paths itself.
router.include_router(permissions.router)
