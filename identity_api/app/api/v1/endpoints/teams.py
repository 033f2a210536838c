"""
Team endpoints for API v1.

Teams and their members.  ``member_count`` is maintained by the server
and always equals the number of members added to the team.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.team import Team, TeamCreate, TeamMember, TeamMemberCreate
from identity_api.app.services.team_service import TeamService


router = APIRouter()


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
async def create_team(
    team: TeamCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> Team:
    try:
        return await TeamService.create_team(store, team, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[Team])
async def list_teams(store: Store = Depends(get_store)) -> List[Team]:
    return await TeamService.list_teams(store)


@router.get("/{team_id}", response_model=Team)
async def get_team(team_id: str, store: Store = Depends(get_store)) -> Team:
    try:
        return await TeamService.get_team(store, team_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")


@router.post("/{team_id}/members", response_model=TeamMember, status_code=status.HTTP_201_CREATED)
async def add_team_member(
    team_id: str,
    member: TeamMemberCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> TeamMember:
    """Add a user to a team and increment its ``member_count``."""
    try:
        return await TeamService.add_member(store, team_id, member, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")


@router.get("/{team_id}/members", response_model=List[TeamMember])
async def list_team_members(team_id: str, store: Store = Depends(get_store)) -> List[TeamMember]:
    """List members in the order they joined."""
    try:
        return await TeamService.list_members(store, team_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
