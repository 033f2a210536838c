"""
Activity tracking.

Activity records describe what a user did (logged in, viewed a page,
edited something).  They can be posted by clients directly and are
also written by other services as a side effect, e.g. a ``login``
record when a session is created.  Side-effect records are
best-effort, like audit records.
"""

import logging
from typing import Any, Dict, List, Optional

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.activity import ActivityLog, ActivityLogCreate

logger = logging.getLogger(__name__)


class ActivityService:
    """Record and query user activity."""

    @classmethod
    async def create_activity(cls, store: Store, data: ActivityLogCreate, origin: RequestOrigin) -> ActivityLog:
        entry = ActivityLog(id=generate_id("activity"), ip_address=origin.ip_address, **data.model_dump())
        return store.append_activity(entry)

    @classmethod
    async def track(
        cls,
        store: Store,
        *,
        user_id: str,
        activity_type: str,
        description: str,
        origin: RequestOrigin,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Optional[ActivityLog]:
        """Append an activity record without failing the caller."""
        try:
            return await cls.create_activity(
                store,
                ActivityLogCreate(
                    user_id=user_id,
                    activity_type=activity_type,
                    description=description,
                    metadata=metadata,
                ),
                origin,
            )
        except Exception:
            logger.warning("Failed to record %s activity for %s", activity_type, user_id, exc_info=True)
            return None

    @classmethod
    async def list_user_activity(cls, store: Store, user_id: str, limit: int) -> List[ActivityLog]:
        """Return up to ``limit`` records of the user, newest first."""
        return store.get_user_activity_logs(user_id, limit)
