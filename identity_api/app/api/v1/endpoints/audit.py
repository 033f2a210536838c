"""
Audit log endpoints for API v1.

Provides read access to the audit trail.  Records are written by the
services as a side effect of creations, updates, grants, password
resets and invitation changes.
"""

from typing import List

from fastapi import APIRouter, Depends

from identity_api.app.core.deps import get_store, list_limit
from identity_api.app.core.store import Store
from identity_api.app.schemas.audit import AuditLog
from identity_api.app.services.audit_service import AuditService

router = APIRouter()


@router.get("", response_model=List[AuditLog])
async def list_audit_logs(
    limit: int = Depends(list_limit),
    store: Store = Depends(get_store),
) -> List[AuditLog]:
    """Return the ``limit`` most recent audit records.

    The window is returned in insertion order, oldest first.  ``limit``
    defaults to 50; a value that is not an integer also yields 50.
    """
    return await AuditService.list_logs(store, limit)
