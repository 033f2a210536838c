"""
Permission endpoints for API v1.

Two groups of routes live here: the permission catalog under
``/permissions`` and per-user grants under ``/users/{user_id}/permissions``.
The router is therefore included without a prefix.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.common import MessageResponse
from identity_api.app.schemas.permission import (
    Permission,
    PermissionCreate,
    UserPermission,
    UserPermissionGrant,
)
from identity_api.app.services.permission_service import PermissionService

router = APIRouter()


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@router.get("/permissions", response_model=List[Permission], tags=["permissions"])
async def list_permissions(store: Store = Depends(get_store)) -> List[Permission]:
    return await PermissionService.list_permissions(store)


@router.post(
    "/permissions",
    response_model=Permission,
    status_code=status.HTTP_201_CREATED,
    tags=["permissions"],
)
async def create_permission(
    body: PermissionCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> Permission:
    try:
        return await PermissionService.create_permission(store, body, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/permissions/{permission_id}", response_model=Permission, tags=["permissions"])
async def get_permission(permission_id: str, store: Store = Depends(get_store)) -> Permission:
    try:
        return await PermissionService.get_permission(store, permission_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Permission not found")


# ---------------------------------------------------------------------------
# Grants
# ---------------------------------------------------------------------------

@router.post(
    "/users/{user_id}/permissions",
    response_model=UserPermission,
    status_code=status.HTTP_201_CREATED,
    tags=["users"],
)
async def grant_user_permission(
    user_id: str,
    body: UserPermissionGrant,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserPermission:
    """Grant a catalog permission to a user.

    Returns 404 when ``permission_id`` is not in the catalog.
    """
    try:
        return await PermissionService.grant(store, user_id, body, origin)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/users/{user_id}/permissions", response_model=List[UserPermission], tags=["users"])
async def list_user_permissions(user_id: str, store: Store = Depends(get_store)) -> List[UserPermission]:
    """List a user's grants in the order they were made."""
    return await PermissionService.list_user_permissions(store, user_id)


@router.delete(
    "/users/{user_id}/permissions/{permission_id}",
    response_model=MessageResponse,
    tags=["users"],
)
async def revoke_user_permission(
    user_id: str,
    permission_id: str,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> MessageResponse:
    """Revoke the first grant of ``permission_id`` held by the user."""
    try:
        await PermissionService.revoke(store, user_id, permission_id, origin)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Permission revoked")
