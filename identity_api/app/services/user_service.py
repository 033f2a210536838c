"""
Business logic for users.

The ``UserService`` assigns IDs and defaults, stores users in the
in-memory store and writes an audit record for each creation and
update.  Passwords are stored as given; hashing is out of scope for
this service.
"""

import logging
from typing import List

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.user import User, UserCreate, UserRead, UserUpdate
from identity_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class UserService:
    """Service for user records."""

    @classmethod
    async def create_user(cls, store: Store, data: UserCreate, origin: RequestOrigin) -> UserRead:
        """Create a new user.

        The user receives a generated ID and ``is_active=True``.  Raises
        ``AlreadyExistsError`` if the ID is taken.
        """
        user = User(id=generate_id("user"), is_active=True, **data.model_dump())
        created = store.create_user(user)
        logger.info("Registered user %s (%s)", created.id, created.email)
        await AuditService.log(
            store,
            user_id=created.id,
            action="user.created",
            resource_type="user",
            resource_id=created.id,
            origin=origin,
        )
        return UserRead.model_validate(created)

    @classmethod
    async def get_user(cls, store: Store, user_id: str) -> UserRead:
        return UserRead.model_validate(store.get_user(user_id))

    @classmethod
    async def list_users(cls, store: Store) -> List[UserRead]:
        return [UserRead.model_validate(user) for user in store.list_users()]

    @classmethod
    async def update_user(
        cls, store: Store, user_id: str, data: UserUpdate, origin: RequestOrigin
    ) -> UserRead:
        """Replace a user's record.

        Raises ``NotFoundError`` if the user does not exist.
        """
        updated = store.update_user(user_id, User(id=user_id, **data.model_dump()))
        logger.info("Updated user %s", user_id)
        await AuditService.log(
            store,
            user_id=user_id,
            action="user.updated",
            resource_type="user",
            resource_id=user_id,
            origin=origin,
        )
        return UserRead.model_validate(updated)
