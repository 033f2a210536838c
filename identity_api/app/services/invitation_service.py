"""
Invitation lifecycle.

An invitation is created ``pending`` with a fresh token and an
``expires_at`` ``settings.invitation_ttl_hours`` ahead.  From
``pending`` it moves exactly once: to ``accepted`` when accepted in
time, to ``expired`` when an accept arrives too late, or to
``revoked``.  Each transition is checked and applied inside a single
store operation.
"""

import logging
from datetime import timedelta
from typing import List

from identity_api.app.core.config import settings
from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.exceptions import InvitationExpiredError
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.invitation import Invitation, InvitationCreate
from identity_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class InvitationService:
    """Service for invitations."""

    @classmethod
    async def create_invitation(cls, store: Store, data: InvitationCreate, origin: RequestOrigin) -> Invitation:
        invitation = store.create_invitation(
            Invitation(
                id=generate_id("invitation"),
                token=generate_id("invite"),
                expires_at=store.now() + timedelta(hours=settings.invitation_ttl_hours),
                **data.model_dump(),
            )
        )
        logger.info("Invitation %s created for %s", invitation.id, invitation.email)
        await AuditService.log(
            store,
            user_id=invitation.invited_by or None,
            action="invitation.created",
            resource_type="invitation",
            resource_id=invitation.id,
            origin=origin,
        )
        return invitation

    @classmethod
    async def get_invitation(cls, store: Store, token: str) -> Invitation:
        return store.get_invitation(token)

    @classmethod
    async def list_pending(cls, store: Store) -> List[Invitation]:
        return store.list_pending_invitations()

    @classmethod
    async def accept_invitation(cls, store: Store, token: str, origin: RequestOrigin) -> Invitation:
        """Accept a pending invitation.

        Raises ``NotFoundError``, ``InvitationAlreadyProcessedError`` or
        ``InvitationExpiredError``; in the last case the invitation has
        been moved to ``expired``.
        """
        try:
            invitation = store.accept_invitation(token)
        except InvitationExpiredError:
            expired = store.get_invitation(token)
            logger.info("Invitation %s expired before acceptance", expired.id)
            await AuditService.log(
                store,
                user_id=None,
                action="invitation.expired",
                resource_type="invitation",
                resource_id=expired.id,
                origin=origin,
                status="failure",
            )
            raise
        await AuditService.log(
            store,
            user_id=None,
            action="invitation.accepted",
            resource_type="invitation",
            resource_id=invitation.id,
            origin=origin,
            details={"email": invitation.email, "team_id": invitation.team_id},
        )
        return invitation

    @classmethod
    async def revoke_invitation(cls, store: Store, token: str, origin: RequestOrigin) -> Invitation:
        invitation = store.revoke_invitation(token)
        await AuditService.log(
            store,
            user_id=invitation.invited_by or None,
            action="invitation.revoked",
            resource_type="invitation",
            resource_id=invitation.id,
            origin=origin,
        )
        return invitation
