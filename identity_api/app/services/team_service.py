"""
Service layer for teams and their members.

Teams start with ``member_count`` 0.  Adding a member appends it to the
team's member list and increments the counter in the same store
operation, so the counter always matches the number of members added.
"""

import logging
from typing import List

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.team import Team, TeamCreate, TeamMember, TeamMemberCreate
from identity_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class TeamService:
    """Service for teams."""

    @classmethod
    async def create_team(cls, store: Store, data: TeamCreate, origin: RequestOrigin) -> Team:
        team = store.create_team(Team(id=generate_id("team"), member_count=0, **data.model_dump()))
        logger.info("Team %s created by %s", team.id, team.owner_id or "unknown owner")
        await AuditService.log(
            store,
            user_id=team.owner_id or None,
            action="team.created",
            resource_type="team",
            resource_id=team.id,
            origin=origin,
        )
        return team

    @classmethod
    async def get_team(cls, store: Store, team_id: str) -> Team:
        return store.get_team(team_id)

    @classmethod
    async def list_teams(cls, store: Store) -> List[Team]:
        return store.list_teams()

    @classmethod
    async def add_member(
        cls, store: Store, team_id: str, data: TeamMemberCreate, origin: RequestOrigin
    ) -> TeamMember:
        """Add a user to a team.

        Raises ``NotFoundError`` if the team does not exist.
        """
        member = store.add_team_member(
            TeamMember(id=generate_id("member"), team_id=team_id, **data.model_dump())
        )
        logger.info("User %s joined team %s as %s", member.user_id, team_id, member.role)
        await AuditService.log(
            store,
            user_id=member.user_id,
            action="team.member_added",
            resource_type="team",
            resource_id=team_id,
            origin=origin,
            details={"member_id": member.id, "role": member.role},
        )
        return member

    @classmethod
    async def list_members(cls, store: Store, team_id: str) -> List[TeamMember]:
        return store.get_team_members(team_id)
