"""
Preferences endpoints for API v1.

Preferences are addressed by user ID.  ``POST`` replaces any
preferences the user already has; ``PUT`` requires existing ones.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.preferences import PreferencesCreate, PreferencesUpdate, UserPreferences
from identity_api.app.services.preferences_service import PreferencesService

router = APIRouter()


@router.post("", response_model=UserPreferences, status_code=status.HTTP_201_CREATED)
async def create_preferences(
    body: PreferencesCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserPreferences:
    return await PreferencesService.create_preferences(store, body, origin)


@router.get("/user/{user_id}", response_model=UserPreferences)
async def get_preferences(user_id: str, store: Store = Depends(get_store)) -> UserPreferences:
    try:
        return await PreferencesService.get_preferences(store, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preferences not found")


@router.put("/user/{user_id}", response_model=UserPreferences)
async def update_preferences(
    user_id: str,
    body: PreferencesUpdate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> UserPreferences:
    try:
        return await PreferencesService.update_preferences(store, user_id, body, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preferences not found")
