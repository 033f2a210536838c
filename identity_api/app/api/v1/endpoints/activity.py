"""Activity log endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store, list_limit
from identity_api.app.core.store import Store
from identity_api.app.schemas.activity import ActivityLog, ActivityLogCreate
from identity_api.app.services.activity_service import ActivityService

router = APIRouter()


@router.post("", response_model=ActivityLog, status_code=status.HTTP_201_CREATED)
async def create_activity_log(
    body: ActivityLogCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> ActivityLog:
    """Record an activity; the caller's address is stored with it."""
    return await ActivityService.create_activity(store, body, origin)


@router.get("/user/{user_id}", response_model=List[ActivityLog])
async def list_user_activity(
    user_id: str,
    limit: int = Depends(list_limit),
    store: Store = Depends(get_store),
) -> List[ActivityLog]:
    """Return up to ``limit`` (default 50) records of the user, newest first."""
    return await ActivityService.list_user_activity(store, user_id, limit)
