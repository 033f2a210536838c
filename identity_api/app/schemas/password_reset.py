"""Pydantic models for password reset tokens and their request bodies."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PasswordResetRequest(BaseModel):
    email: str = Field(..., examples=["user@example.com"])


class PasswordResetConfirm(BaseModel):
    token: str
    new_password: str


class PasswordResetIssued(BaseModel):
    """Response of ``/password-reset/request``.

    The token is returned directly because no email is sent.
    """

    message: str
    token: str


class PasswordReset(BaseModel):
    id: str
    user_id: Optional[str] = None
    token: str
    expires_at: datetime
    used: bool = False
    created_at: Optional[datetime] = None
