"""
Session endpoints for API v1.

Sessions are addressed by token.  Opening and deleting a session is
recorded as ``login``/``logout`` activity of the user.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import AlreadyExistsError, NotFoundError
from identity_api.app.core.store import Store
from identity_api.app.schemas.common import MessageResponse
from identity_api.app.schemas.session import Session, SessionCreate
from identity_api.app.services.session_service import SessionService

router = APIRouter()


@router.post("", response_model=Session, status_code=status.HTTP_201_CREATED)
async def create_session(
    body: SessionCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> Session:
    try:
        return await SessionService.create_session(store, body.user_id, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/user/{user_id}", response_model=List[Session])
async def list_user_sessions(user_id: str, store: Store = Depends(get_store)) -> List[Session]:
    return await SessionService.list_user_sessions(store, user_id)


@router.get("/{token}", response_model=Session)
async def get_session(token: str, store: Store = Depends(get_store)) -> Session:
    try:
        return await SessionService.get_session(store, token)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")


@router.delete("/{token}", response_model=MessageResponse)
async def delete_session(
    token: str,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> MessageResponse:
    try:
        await SessionService.delete_session(store, token, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return MessageResponse(message="Session deleted")
