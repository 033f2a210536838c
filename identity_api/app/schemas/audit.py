"""Pydantic model for audit trail entries."""

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel


class AuditLog(BaseModel):
    """One immutable audit record.

    ``action`` is dot-namespaced (``user.created``, ``permission.granted``).
    ``user_id`` identifies the actor when one is known.
    """

    id: str
    user_id: Optional[str] = None
    action: str
    resource_id: Optional[str] = None
    resource_type: str
    ip_address: str = ""
    user_agent: str = ""
    status: Literal["success", "failure"] = "success"
    details: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
