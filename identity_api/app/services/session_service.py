"""
Session management.

A session is created for a user with a fresh token, the caller's
address and user agent, and an ``expires_at`` ``settings.session_ttl_hours``
ahead.  Expiry is informational; sessions disappear only when deleted.
Creating and deleting a session records ``login`` and ``logout``
activity for the user.
"""

import logging
from datetime import timedelta
from typing import List

from identity_api.app.core.config import settings
from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.session import Session
from identity_api.app.services.activity_service import ActivityService

logger = logging.getLogger(__name__)


class SessionService:
    """Service for user sessions."""

    @classmethod
    async def create_session(cls, store: Store, user_id: str, origin: RequestOrigin) -> Session:
        session = store.create_session(
            Session(
                id=generate_id("sess"),
                user_id=user_id,
                token=generate_id("session"),
                ip_address=origin.ip_address,
                user_agent=origin.user_agent,
                expires_at=store.now() + timedelta(hours=settings.session_ttl_hours),
            )
        )
        logger.info("Session %s opened for user %s", session.id, user_id)
        await ActivityService.track(
            store,
            user_id=user_id,
            activity_type="login",
            description="User logged in",
            origin=origin,
        )
        return session

    @classmethod
    async def get_session(cls, store: Store, token: str) -> Session:
        return store.get_session(token)

    @classmethod
    async def list_user_sessions(cls, store: Store, user_id: str) -> List[Session]:
        return store.get_user_sessions(user_id)

    @classmethod
    async def delete_session(cls, store: Store, token: str, origin: RequestOrigin) -> None:
        """Delete a session by token.  Raises ``NotFoundError`` if absent."""
        session = store.delete_session(token)
        logger.info("Session %s closed", session.id)
        await ActivityService.track(
            store,
            user_id=session.user_id,
            activity_type="logout",
            description="User logged out",
            origin=origin,
        )
