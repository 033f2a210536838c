"""
User endpoints for API v1.

Create, list, fetch and replace users.  Passwords are accepted on
input but never returned.  Creation and replacement are recorded in
the audit log.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from identity_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserRead:
    """Register a new user.

    The server assigns the ID, marks the user active and stamps
    ``created_at``/``updated_at``.
    """
    try:
        return await UserService.create_user(store, user, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[UserRead])
async def list_users(store: Store = Depends(get_store)) -> List[UserRead]:
    """List all users in no particular order."""
    return await UserService.list_users(store)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, store: Store = Depends(get_store)) -> UserRead:
    try:
        return await UserService.get_user(store, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    user: UserUpdate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserRead:
    """Replace a user.

    This is a full replacement, not a merge: fields missing from the
    body take their defaults.  The stored password is kept when the
    body does not carry one.
    """
    try:
        return await UserService.update_user(store, user_id, user, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
