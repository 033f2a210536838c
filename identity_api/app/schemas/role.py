"""Pydantic models for roles.

A role bundles permission strings; ``"*"`` stands for every permission.
Permissions are stored for clients to interpret and are not enforced by
the API itself.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


WILDCARD_PERMISSION = "*"


class RoleCreate(BaseModel):
    name: str = Field(..., examples=["Auditor"])
    description: str = ""
    permissions: List[str] = Field(default_factory=list, examples=[["users.read"]])


class Role(RoleCreate):
    id: str
    created_at: Optional[datetime] = None