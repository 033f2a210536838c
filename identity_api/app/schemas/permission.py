"""Pydantic models for the permission catalog and per-user grants."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

PermissionAction = Literal["create", "read", "update", "delete", "manage"]


class PermissionCreate(BaseModel):
    name: str = Field(..., examples=["reports.read"])
    resource: str
    action: PermissionAction
    description: str = ""


class Permission(PermissionCreate):
    id: str
    created_at: Optional[datetime] = None


class UserPermissionGrant(BaseModel):
    permission_id: str
    granted_by: str = ""


class UserPermission(UserPermissionGrant):
    id: str
    user_id: str
    granted_at: Optional[datetime] = None
