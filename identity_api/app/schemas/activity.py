"""Pydantic models for user activity tracking."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ActivityLogCreate(BaseModel):
    user_id: str
    # login, logout, view, edit, create, delete
    activity_type: str = Field(..., examples=["view"])
    description: str = ""
    metadata: Optional[Dict[str, Any]] = None


class ActivityLog(ActivityLogCreate):
    id: str
    ip_address: str = ""
    created_at: Optional[datetime] = None
