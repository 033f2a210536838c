"""Pydantic models for extended user profiles."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProfileBase(BaseModel):
    avatar: str = ""
    bio: str = ""
    phone_number: str = ""
    location: str = ""
    company: str = ""
    website: str = ""


class ProfileCreate(ProfileBase):
    user_id: str = Field(..., examples=["user-9f86d081884c7d65"])


class ProfileUpdate(ProfileBase):
    """Replacement body for ``PUT /profiles/user/{user_id}``."""


class UserProfile(ProfileBase):
    id: str
    user_id: str
    updated_at: Optional[datetime] = None
