"""
Pydantic models for invitations.

An invitation moves one way through its states: ``pending`` to
``accepted``, ``expired`` or ``revoked``.  Expiry is detected lazily,
when someone tries to accept a pending invitation past ``expires_at``.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

InvitationStatus = Literal["pending", "accepted", "expired", "revoked"]

PENDING: InvitationStatus = "pending"
ACCEPTED: InvitationStatus = "accepted"
EXPIRED: InvitationStatus = "expired"
REVOKED: InvitationStatus = "revoked"


class InvitationCreate(BaseModel):
    email: str = Field(..., examples=["new.hire@example.com"])
    team_id: Optional[str] = None
    role_id: str = ""
    invited_by: str = ""


class Invitation(InvitationCreate):
    id: str
    token: str
    status: InvitationStatus = PENDING
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
