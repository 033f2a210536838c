"""Pydantic models for per-user preferences."""

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

Theme = Literal["light", "dark", "auto"]


class PreferencesBase(BaseModel):
    theme: Theme = "auto"
    language: str = "en"
    timezone: str = "UTC"
    notifications: Dict[str, bool] = Field(default_factory=dict, examples=[{"email": True}])
    settings: Dict[str, Any] = Field(default_factory=dict)


class PreferencesCreate(PreferencesBase):
    user_id: str


class PreferencesUpdate(PreferencesBase):
    """Replacement body for ``PUT /preferences/user/{user_id}``."""


class UserPreferences(PreferencesBase):
    id: str
    user_id: str
    updated_at: Optional[datetime] = None
