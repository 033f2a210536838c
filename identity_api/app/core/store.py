"""
In-memory store for every entity kind of the Identity API.

``Store`` owns one dictionary per entity kind plus two append-only
logs (audit and activity).  All collections sit behind a single
reader-writer lock: lookups and listings share the lock, mutations take
it exclusively.  Every method acquires the lock exactly once and never
calls another locking method while holding it, so there is no
re-entrancy and no deadlock.

Records are pydantic models.  The store hands out deep copies, so a
caller mutating a returned object never changes stored state outside
the lock.  Timestamps are stamped here, at the moment of the mutation,
from the injectable ``clock``.

The application keeps one ``Store`` on ``app.state.store``; request
handlers obtain it through ``core.deps.get_store``.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Dict, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

from .exceptions import (
    AlreadyExistsError,
    InvitationAlreadyProcessedError,
    InvitationExpiredError,
    NotFoundError,
    TokenAlreadyUsedError,
    TokenExpiredError,
)
from ..schemas.activity import ActivityLog
from ..schemas.audit import AuditLog
from ..schemas.invitation import ACCEPTED, EXPIRED, PENDING, REVOKED, Invitation
from ..schemas.password_reset import PasswordReset
from ..schemas.permission import Permission, UserPermission
from ..schemas.preferences import UserPreferences
from ..schemas.profile import UserProfile
from ..schemas.role import WILDCARD_PERMISSION, Role
from ..schemas.session import Session
from ..schemas.team import Team, TeamMember
from ..schemas.user import User

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _copy(record: M) -> M:
    return record.model_copy(deep=True)


class ReadWriteLock:
    """Shared/exclusive lock built on ``threading.Condition``.

    Any number of readers may hold the lock together; a writer holds it
    alone.  A waiting writer blocks new readers so that writers are not
    starved by a steady stream of lookups.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class Store:
    """Process-wide in-memory database guarded by one reader-writer lock."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._lock = ReadWriteLock()
        self._clock: Clock = clock or utc_now
        self._users: Dict[str, User] = {}
        self._roles: Dict[str, Role] = {}
        self._profiles: Dict[str, UserProfile] = {}
        self._teams: Dict[str, Team] = {}
        self._team_members: Dict[str, List[TeamMember]] = {}
        self._audit_logs: List[AuditLog] = []
        self._password_resets: Dict[str, PasswordReset] = {}
        self._sessions: Dict[str, Session] = {}
        self._preferences: Dict[str, UserPreferences] = {}
        self._activity_logs: List[ActivityLog] = []
        self._invitations: Dict[str, Invitation] = {}
        self._permissions: Dict[str, Permission] = {}
        self._user_permissions: Dict[str, List[UserPermission]] = {}

    def now(self) -> datetime:
        return self._clock()

    def reset(self) -> None:
        """Drop every record, including seeded defaults."""
        with self._lock.write():
            for collection in (
                self._users,
                self._roles,
                self._profiles,
                self._teams,
                self._team_members,
                self._password_resets,
                self._sessions,
                self._preferences,
                self._invitations,
                self._permissions,
                self._user_permissions,
            ):
                collection.clear()
            self._audit_logs.clear()
            self._activity_logs.clear()

    def seed_defaults(self) -> None:
        """Install the two built-in roles and the five built-in permissions."""
        now = self.now()
        roles = [
            Role(id="role-1", name="Admin", description="Full system access",
                 permissions=[WILDCARD_PERMISSION], created_at=now),
            Role(id="role-2", name="User", description="Standard user access",
                 permissions=["read:own", "write:own"], created_at=now),
        ]
        permissions = [
            Permission(id="perm-1", name="users.create", resource="users", action="create",
                       description="Create new users", created_at=now),
            Permission(id="perm-2", name="users.read", resource="users", action="read",
                       description="View users", created_at=now),
            Permission(id="perm-3", name="users.update", resource="users", action="update",
                       description="Update users", created_at=now),
            Permission(id="perm-4", name="users.delete", resource="users", action="delete",
                       description="Delete users", created_at=now),
            Permission(id="perm-5", name="teams.manage", resource="teams", action="manage",
                       description="Manage teams", created_at=now),
        ]
        with self._lock.write():
            for role in roles:
                self._roles[role.id] = role
            for permission in permissions:
                self._permissions[permission.id] = permission
        logger.info("Seeded %d roles and %d permissions", len(roles), len(permissions))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, user: User) -> User:
        with self._lock.write():
            if user.id in self._users:
                raise AlreadyExistsError(f"User {user.id} already exists")
            now = self.now()
            stored = user.model_copy(update={"created_at": now, "updated_at": now}, deep=True)
            self._users[user.id] = stored
            return _copy(stored)

    def get_user(self, user_id: str) -> User:
        with self._lock.read():
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError(f"User {user_id} not found")
            return _copy(user)

    def list_users(self) -> List[User]:
        with self._lock.read():
            return [_copy(user) for user in self._users.values()]

    def find_user_by_email(self, email: str) -> Optional[User]:
        with self._lock.read():
            for user in self._users.values():
                if user.email and user.email.lower() == email.lower():
                    return _copy(user)
            return None

    def update_user(self, user_id: str, user: User) -> User:
        """Replace the stored user.

        The replacement is not merged with the old record, except that
        ``created_at`` is preserved and the stored password survives a
        replacement that carries none.
        """
        with self._lock.write():
            existing = self._users.get(user_id)
            if existing is None:
                raise NotFoundError(f"User {user_id} not found")
            stored = user.model_copy(
                update={
                    "id": user_id,
                    "password": user.password if user.password is not None else existing.password,
                    "created_at": existing.created_at,
                    "updated_at": self.now(),
                },
                deep=True,
            )
            self._users[user_id] = stored
            return _copy(stored)

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------
    def create_role(self, role: Role) -> Role:
        with self._lock.write():
            if role.id in self._roles:
                raise AlreadyExistsError(f"Role {role.id} already exists")
            stored = role.model_copy(update={"created_at": self.now()}, deep=True)
            self._roles[role.id] = stored
            return _copy(stored)

    def get_role(self, role_id: str) -> Role:
        with self._lock.read():
            role = self._roles.get(role_id)
            if role is None:
                raise NotFoundError(f"Role {role_id} not found")
            return _copy(role)

    def list_roles(self) -> List[Role]:
        with self._lock.read():
            return [_copy(role) for role in self._roles.values()]

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------
    def create_profile(self, profile: UserProfile) -> UserProfile:
        with self._lock.write():
            if profile.id in self._profiles:
                raise AlreadyExistsError(f"Profile {profile.id} already exists")
            stored = profile.model_copy(update={"updated_at": self.now()}, deep=True)
            self._profiles[profile.id] = stored
            return _copy(stored)

    def _profile_for_user(self, user_id: str) -> Optional[UserProfile]:
        # No secondary index: first profile created for the user wins.
        for profile in self._profiles.values():
            if profile.user_id == user_id:
                return profile
        return None

    def get_profile_by_user_id(self, user_id: str) -> UserProfile:
        with self._lock.read():
            profile = self._profile_for_user(user_id)
            if profile is None:
                raise NotFoundError(f"Profile for user {user_id} not found")
            return _copy(profile)

    def update_profile(self, user_id: str, profile: UserProfile) -> UserProfile:
        with self._lock.write():
            existing = self._profile_for_user(user_id)
            if existing is None:
                raise NotFoundError(f"Profile for user {user_id} not found")
            stored = profile.model_copy(
                update={"id": existing.id, "user_id": user_id, "updated_at": self.now()},
                deep=True,
            )
            self._profiles[existing.id] = stored
            return _copy(stored)

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def create_team(self, team: Team) -> Team:
        with self._lock.write():
            if team.id in self._teams:
                raise AlreadyExistsError(f"Team {team.id} already exists")
            now = self.now()
            stored = team.model_copy(
                update={"member_count": 0, "created_at": now, "updated_at": now}, deep=True
            )
            self._teams[team.id] = stored
            self._team_members[team.id] = []
            return _copy(stored)

    def get_team(self, team_id: str) -> Team:
        with self._lock.read():
            team = self._teams.get(team_id)
            if team is None:
                raise NotFoundError(f"Team {team_id} not found")
            return _copy(team)

    def list_teams(self) -> List[Team]:
        with self._lock.read():
            return [_copy(team) for team in self._teams.values()]

    def add_team_member(self, member: TeamMember) -> TeamMember:
        """Append a member and bump the team's ``member_count`` atomically."""
        with self._lock.write():
            team = self._teams.get(member.team_id)
            if team is None:
                raise NotFoundError(f"Team {member.team_id} not found")
            now = self.now()
            stored = member.model_copy(update={"joined_at": now}, deep=True)
            self._team_members[member.team_id].append(stored)
            team.member_count += 1
            team.updated_at = now
            return _copy(stored)

    def get_team_members(self, team_id: str) -> List[TeamMember]:
        with self._lock.read():
            if team_id not in self._teams:
                raise NotFoundError(f"Team {team_id} not found")
            return [_copy(member) for member in self._team_members[team_id]]

    # ------------------------------------------------------------------
    # Audit log
    # ------------------------------------------------------------------
    def append_audit(self, entry: AuditLog) -> AuditLog:
        with self._lock.write():
            stored = entry.model_copy(update={"created_at": self.now()}, deep=True)
            self._audit_logs.append(stored)
            return _copy(stored)

    def get_audit_logs(self, limit: int) -> List[AuditLog]:
        """Return the ``limit`` most recent entries, oldest first."""
        with self._lock.read():
            if limit <= 0:
                return []
            return [_copy(entry) for entry in self._audit_logs[-limit:]]

    # ------------------------------------------------------------------
    # Password resets
    # ------------------------------------------------------------------
    def create_password_reset(self, reset: PasswordReset) -> PasswordReset:
        with self._lock.write():
            if reset.token in self._password_resets:
                raise AlreadyExistsError("Reset token already exists")
            stored = reset.model_copy(update={"used": False, "created_at": self.now()}, deep=True)
            self._password_resets[reset.token] = stored
            return _copy(stored)

    def get_password_reset(self, token: str) -> PasswordReset:
        with self._lock.read():
            reset = self._password_resets.get(token)
            if reset is None:
                raise NotFoundError("Reset token not found")
            return _copy(reset)

    def consume_password_reset(self, token: str, new_password: str) -> PasswordReset:
        """Mark a reset token as used and apply the new password.

        Checking and marking happen in one critical section, so two
        concurrent consumers of the same token cannot both succeed.
        """
        with self._lock.write():
            reset = self._password_resets.get(token)
            if reset is None:
                raise NotFoundError("Reset token not found")
            if reset.used:
                raise TokenAlreadyUsedError("Token already used")
            now = self.now()
            if now > reset.expires_at:
                raise TokenExpiredError("Token expired")
            reset.used = True
            user = self._users.get(reset.user_id) if reset.user_id else None
            if user is not None:
                user.password = new_password
                user.updated_at = now
            return _copy(reset)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------
    def create_session(self, session: Session) -> Session:
        with self._lock.write():
            if session.token in self._sessions:
                raise AlreadyExistsError("Session token already exists")
            now = self.now()
            stored = session.model_copy(
                update={"created_at": now, "last_activity": now}, deep=True
            )
            self._sessions[session.token] = stored
            return _copy(stored)

    def get_session(self, token: str) -> Session:
        with self._lock.read():
            session = self._sessions.get(token)
            if session is None:
                raise NotFoundError("Session not found")
            return _copy(session)

    def get_user_sessions(self, user_id: str) -> List[Session]:
        with self._lock.read():
            return [_copy(s) for s in self._sessions.values() if s.user_id == user_id]

    def delete_session(self, token: str) -> Session:
        with self._lock.write():
            session = self._sessions.pop(token, None)
            if session is None:
                raise NotFoundError("Session not found")
            return session

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------
    def create_preferences(self, prefs: UserPreferences) -> UserPreferences:
        """Store preferences for ``prefs.user_id``, replacing any existing ones."""
        with self._lock.write():
            stored = prefs.model_copy(update={"updated_at": self.now()}, deep=True)
            self._preferences[prefs.user_id] = stored
            return _copy(stored)

    def get_preferences(self, user_id: str) -> UserPreferences:
        with self._lock.read():
            prefs = self._preferences.get(user_id)
            if prefs is None:
                raise NotFoundError(f"Preferences for user {user_id} not found")
            return _copy(prefs)

    def update_preferences(self, user_id: str, prefs: UserPreferences) -> UserPreferences:
        with self._lock.write():
            existing = self._preferences.get(user_id)
            if existing is None:
                raise NotFoundError(f"Preferences for user {user_id} not found")
            stored = prefs.model_copy(
                update={"id": existing.id, "user_id": user_id, "updated_at": self.now()},
                deep=True,
            )
            self._preferences[user_id] = stored
            return _copy(stored)

    # ------------------------------------------------------------------
    # Activity log
    # ------------------------------------------------------------------
    def append_activity(self, entry: ActivityLog) -> ActivityLog:
        with self._lock.write():
            stored = entry.model_copy(update={"created_at": self.now()}, deep=True)
            self._activity_logs.append(stored)
            return _copy(stored)

    def get_user_activity_logs(self, user_id: str, limit: int) -> List[ActivityLog]:
        """Return up to ``limit`` entries for the user, newest first."""
        with self._lock.read():
            result: List[ActivityLog] = []
            for entry in reversed(self._activity_logs):
                if len(result) >= limit:
                    break
                if entry.user_id == user_id:
                    result.append(_copy(entry))
            return result

    # ------------------------------------------------------------------
    # Invitations
    # ------------------------------------------------------------------
    def create_invitation(self, invitation: Invitation) -> Invitation:
        with self._lock.write():
            if invitation.token in self._invitations:
                raise AlreadyExistsError("Invitation token already exists")
            stored = invitation.model_copy(
                update={"status": PENDING, "accepted_at": None, "created_at": self.now()},
                deep=True,
            )
            self._invitations[invitation.token] = stored
            return _copy(stored)

    def get_invitation(self, token: str) -> Invitation:
        with self._lock.read():
            invitation = self._invitations.get(token)
            if invitation is None:
                raise NotFoundError("Invitation not found")
            return _copy(invitation)

    def accept_invitation(self, token: str) -> Invitation:
        """Move a pending invitation to ``accepted``.

        A pending invitation past ``expires_at`` is moved to ``expired``
        instead and ``InvitationExpiredError`` is raised.
        """
        with self._lock.write():
            invitation = self._invitations.get(token)
            if invitation is None:
                raise NotFoundError("Invitation not found")
            if invitation.status != PENDING:
                raise InvitationAlreadyProcessedError("Invitation already processed")
            now = self.now()
            if now > invitation.expires_at:
                invitation.status = EXPIRED
                raise InvitationExpiredError("Invitation expired")
            invitation.status = ACCEPTED
            invitation.accepted_at = now
            return _copy(invitation)

    def revoke_invitation(self, token: str) -> Invitation:
        with self._lock.write():
            invitation = self._invitations.get(token)
            if invitation is None:
                raise NotFoundError("Invitation not found")
            if invitation.status != PENDING:
                raise InvitationAlreadyProcessedError("Invitation already processed")
            invitation.status = REVOKED
            return _copy(invitation)

    def list_pending_invitations(self) -> List[Invitation]:
        with self._lock.read():
            return [_copy(i) for i in self._invitations.values() if i.status == PENDING]

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------
    def create_permission(self, permission: Permission) -> Permission:
        with self._lock.write():
            if permission.id in self._permissions:
                raise AlreadyExistsError(f"Permission {permission.id} already exists")
            stored = permission.model_copy(update={"created_at": self.now()}, deep=True)
            self._permissions[permission.id] = stored
            return _copy(stored)

    def get_permission(self, permission_id: str) -> Permission:
        with self._lock.read():
            permission = self._permissions.get(permission_id)
            if permission is None:
                raise NotFoundError(f"Permission {permission_id} not found")
            return _copy(permission)

    def list_permissions(self) -> List[Permission]:
        with self._lock.read():
            return [_copy(p) for p in self._permissions.values()]

    def grant_user_permission(self, grant: UserPermission) -> UserPermission:
        with self._lock.write():
            if grant.permission_id not in self._permissions:
                raise NotFoundError(f"Permission {grant.permission_id} not found")
            stored = grant.model_copy(update={"granted_at": self.now()}, deep=True)
            self._user_permissions.setdefault(grant.user_id, []).append(stored)
            return _copy(stored)

    def get_user_permissions(self, user_id: str) -> List[UserPermission]:
        with self._lock.read():
            return [_copy(g) for g in self._user_permissions.get(user_id, [])]

    def revoke_user_permission(self, user_id: str, permission_id: str) -> UserPermission:
        """Remove the first grant of ``permission_id`` held by the user."""
        with self._lock.write():
            grants = self._user_permissions.get(user_id, [])
            for index, grant in enumerate(grants):
                if grant.permission_id == permission_id:
                    return grants.pop(index)
            raise NotFoundError("Permission not found for user")
