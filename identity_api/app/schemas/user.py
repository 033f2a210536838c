"""
Pydantic models for user data.

``UserCreate`` and ``UserUpdate`` describe request bodies, ``User`` is
the record kept by the store and ``UserRead`` is what the API returns.
The password is accepted on input and stored, but it is never part of
``UserRead`` and is excluded from ``User`` serialization as well.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    email: str = Field("", examples=["user@example.com"])
    username: str = Field("", examples=["jdoe"])
    first_name: str = ""
    last_name: str = ""
    role_id: str = Field("", examples=["role-2"])
    team_id: Optional[str] = None


class UserCreate(UserBase):
    """Schema for registering a user.

    The ID, ``is_active`` flag and timestamps are assigned by the server.
    """

    password: Optional[str] = Field(None, examples=["strongpassword"])


class UserUpdate(UserBase):
    """Full replacement of a user record.

    Fields left out of the body fall back to their defaults; the stored
    password is kept when ``password`` is omitted.
    """

    password: Optional[str] = None
    is_active: bool = True


class User(UserBase):
    """User record as held by the store."""

    id: str
    password: Optional[str] = Field(None, exclude=True)
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }
