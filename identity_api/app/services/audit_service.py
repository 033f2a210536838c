"""
Audit service for recording and querying system actions.

This module provides a centralized API for writing audit events to the
store's append-only audit log and retrieving the most recent ones.
Services call ``AuditService.log`` after their primary mutation has
succeeded.  Writing the audit record is best-effort: a failure is
logged with its traceback and never undoes or fails the request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.audit import AuditLog

logger = logging.getLogger(__name__)


class AuditService:
    """Service class for writing and retrieving audit logs."""

    @classmethod
    async def log(
        cls,
        store: Store,
        *,
        user_id: Optional[str],
        action: str,
        resource_type: str,
        resource_id: Optional[str] = None,
        origin: Optional[RequestOrigin] = None,
        details: Optional[Dict[str, Any]] = None,
        status: str = "success",
    ) -> Optional[AuditLog]:
        """Append a new audit record.

        Parameters
        ----------
        store : Store
            Store receiving the record.
        user_id : Optional[str]
            ID of the user performing the action.  May be ``None`` for
            system-initiated actions or unknown actors.
        action : str
            Dot-namespaced action name (e.g. ``"user.created"``).
        resource_type : str
            Type of object affected (e.g. ``"user"``, ``"team"``).
        resource_id : Optional[str]
            ID of the affected object, if applicable.
        origin : Optional[RequestOrigin]
            Caller address and user agent.
        details : Optional[dict]
            Additional structured data about the action.

        Returns
        -------
        Optional[AuditLog]
            The stored record, or ``None`` when it could not be written.
        """
        origin = origin or RequestOrigin()
        entry = AuditLog(
            id=generate_id("audit"),
            user_id=user_id,
            action=action,
            resource_id=resource_id,
            resource_type=resource_type,
            ip_address=origin.ip_address,
            user_agent=origin.user_agent,
            status=status,
            details=details,
        )
        try:
            return store.append_audit(entry)
        except Exception:
            logger.warning("Failed to write audit record %s for %s", action, resource_id, exc_info=True)
            return None

    @classmethod
    async def list_logs(cls, store: Store, limit: int) -> List[AuditLog]:
        """Return the ``limit`` most recent records in insertion order."""
        return store.get_audit_logs(limit)
