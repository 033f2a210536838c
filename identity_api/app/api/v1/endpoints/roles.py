"""
Role endpoints for API v1.

Roles carry permission strings that clients may interpret; the API
stores them but does not enforce them.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.role import Role, RoleCreate
from identity_api.app.services.role_service import RoleService


router = APIRouter()


@router.post("", response_model=Role, status_code=status.HTTP_201_CREATED)
async def create_role(
    body: RoleCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> Role:
    """Create a new role.

    The request body must contain a ``name`` and may include a
    ``description`` and ``permissions`` (list of strings).
    """
    try:
        return await RoleService.create_role(store, body, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[Role])
async def list_roles(store: Store = Depends(get_store)) -> List[Role]:
    return await RoleService.list_roles(store)


@router.get("/{role_id}", response_model=Role)
async def get_role(role_id: str, store: Store = Depends(get_store)) -> Role:
    try:
        return await RoleService.get_role(store, role_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found")
