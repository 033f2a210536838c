"""Pydantic models for user sessions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SessionCreate(BaseModel):
    user_id: str


class Session(BaseModel):
    """A login session, keyed by its token.

    ``expires_at`` is informational; sessions are only removed by an
    explicit delete.
    """

    id: str
    user_id: str
    token: str
    ip_address: str = ""
    user_agent: str = ""
    expires_at: datetime
    last_activity: Optional[datetime] = None
    created_at: Optional[datetime] = None
