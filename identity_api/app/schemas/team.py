"""
Pydantic models for teams and team membership.

``Team.member_count`` is derived: the store increments it each time a
member is added and it is never accepted from clients.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

TeamRole = Literal["admin", "member", "viewer"]


class TeamCreate(BaseModel):
    name: str = Field(..., examples=["Platform"])
    description: str = ""
    owner_id: str = ""


class Team(TeamCreate):
    id: str
    member_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TeamMemberCreate(BaseModel):
    user_id: str
    role: TeamRole = "member"


class TeamMember(TeamMemberCreate):
    id: str
    team_id: str
    joined_at: Optional[datetime] = None
