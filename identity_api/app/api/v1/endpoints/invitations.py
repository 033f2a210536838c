"""
Invitation endpoints for API v1.

Invitations are addressed by token.  Accepting or revoking only works
while the invitation is pending; an accept after ``expires_at`` marks
it expired and fails.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import (
    AlreadyExistsError,
    InvitationAlreadyProcessedError,
    InvitationExpiredError,
    NotFoundError,
)
from identity_api.app.core.store import Store
from identity_api.app.schemas.common import MessageResponse
from identity_api.app.schemas.invitation import Invitation, InvitationCreate
from identity_api.app.services.invitation_service import InvitationService

router = APIRouter()


@router.post("", response_model=Invitation, status_code=status.HTTP_201_CREATED)
async def create_invitation(
    body: InvitationCreate,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> Invitation:
    try:
        return await InvitationService.create_invitation(store, body, origin)
    except AlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# Declared before "/{token}" so that "pending" is not taken for a token.
@router.get("/pending", response_model=List[Invitation])
async def list_pending_invitations(store: Store = Depends(get_store)) -> List[Invitation]:
    """List pending invitations, including ones past ``expires_at``."""
    return await InvitationService.list_pending(store)


@router.get("/{token}", response_model=Invitation)
async def get_invitation(token: str, store: Store = Depends(get_store)) -> Invitation:
    try:
        return await InvitationService.get_invitation(store, token)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found")


@router.post("/{token}/accept", response_model=MessageResponse)
async def accept_invitation(
    token: str,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> MessageResponse:
    try:
        await InvitationService.accept_invitation(store, token, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found")
    except (InvitationAlreadyProcessedError, InvitationExpiredError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Invitation accepted")


@router.post("/{token}/revoke", response_model=MessageResponse)
async def revoke_invitation(
    token: str,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> MessageResponse:
    try:
        await InvitationService.revoke_invitation(store, token, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found")
    except InvitationAlreadyProcessedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Invitation revoked")
