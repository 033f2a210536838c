"""
Profile endpoints for API v1.

Profiles are created with ``POST /profiles`` and afterwards addressed
by the ID of the user they belong to.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.profile import ProfileCreate, ProfileUpdate, UserProfile
from identity_api.app.services.profile_service import ProfileService


router = APIRouter()


@router.post("", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
async def create_profile(
    profile: ProfileCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserProfile:
    try:
        return await ProfileService.create_profile(store, profile, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/user/{user_id}", response_model=UserProfile)
async def get_profile(user_id: str, store: Store = Depends(get_store)) -> UserProfile:
    try:
        return await ProfileService.get_profile(store, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")


@router.put("/user/{user_id}", response_model=UserProfile)
async def update_profile(
    user_id: str,
    profile: ProfileUpdate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserProfile:
    """Replace the profile of a user, keeping its profile ID."""
    try:
        return await ProfileService.update_profile(store, user_id, profile, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
