"""
Password reset workflow.

Requesting a reset issues a token valid for
``settings.password_reset_ttl_hours``.  The token is linked to the user
whose email matches, when there is one; unknown emails still receive a
token so the endpoint does not reveal which addresses are registered.
No email is sent: the token is returned to the caller.

Consuming a token checks, in order, that it exists, has not been used
and has not expired.  Expiry is only evaluated here; stale tokens are
never swept.
"""

import logging
from datetime import timedelta

from identity_api.app.core.config import settings
from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.password_reset import PasswordReset
from identity_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class PasswordResetService:
    """Issue and consume password reset tokens."""

    @classmethod
    async def request_reset(cls, store: Store, email: str, origin: RequestOrigin) -> PasswordReset:
        user = store.find_user_by_email(email)
        user_id = user.id if user else None
        reset = store.create_password_reset(
            PasswordReset(
                id=generate_id("pwreset"),
                user_id=user_id,
                token=generate_id("reset"),
                expires_at=store.now() + timedelta(hours=settings.password_reset_ttl_hours),
            )
        )
        if user_id is None:
            logger.info("Password reset requested for unknown email")
        await AuditService.log(
            store,
            user_id=user_id,
            action="password.reset_requested",
            resource_type="user",
            resource_id=user_id,
            origin=origin,
        )
        return reset

    @classmethod
    async def reset_password(
        cls, store: Store, token: str, new_password: str, origin: RequestOrigin
    ) -> PasswordReset:
        """Consume ``token`` and set the linked user's password.

        Raises ``NotFoundError``, ``TokenAlreadyUsedError`` or
        ``TokenExpiredError``.
        """
        reset = store.consume_password_reset(token, new_password)
        logger.info("Password reset token %s consumed", reset.id)
        await AuditService.log(
            store,
            user_id=reset.user_id,
            action="password.reset",
            resource_type="user",
            resource_id=reset.user_id,
            origin=origin,
        )
        return reset
