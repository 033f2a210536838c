"""
Password reset endpoints for API v1.

``/request`` issues a reset token for an email address and
``/reset`` consumes it.  The token is returned in the response because
no email is delivered.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from identity_api.app.core.deps import RequestOrigin, get_origin, get_store
from identity_api.app.core.exceptions import NotFoundError, TokenAlreadyUsedError, TokenExpiredError
from identity_api.app.core.store import Store
from identity_api.app.schemas.common import MessageResponse
from identity_api.app.schemas.password_reset import (
    PasswordResetConfirm,
    PasswordResetIssued,
    PasswordResetRequest,
)
from identity_api.app.services.password_reset_service import PasswordResetService

router = APIRouter()


@router.post("/request", response_model=PasswordResetIssued)
async def request_password_reset(
    body: PasswordResetRequest,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> PasswordResetIssued:
    reset = await PasswordResetService.request_reset(store, body.email, origin)
    return PasswordResetIssued(message="Password reset email sent", token=reset.token)


@router.post("/reset", response_model=MessageResponse)
async def reset_password(
    body: PasswordResetConfirm,
    store: Store = Depends(get_store),
    origin: RequestOrigin = Depends(get_origin),
) -> MessageResponse:
    """Consume a reset token.

    Returns 404 for an unknown token and 400 when the token was already
    used or has expired.
    """
    try:
        await PasswordResetService.reset_password(store, body.token, body.new_password, origin)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid reset token")
    except (TokenAlreadyUsedError, TokenExpiredError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Password reset successful")
