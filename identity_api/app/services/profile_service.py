"""
Service layer for extended user profiles.

A profile is looked up by the ID of the user it describes.  The store
keeps profiles keyed by their own ID, so lookups by user scan the
collection.  Nothing stops two profiles from naming the same user; the
first one created is the one returned and replaced.
"""

import logging

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.profile import ProfileCreate, ProfileUpdate, UserProfile
from identity_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for user profiles."""

    @classmethod
    async def create_profile(cls, store: Store, data: ProfileCreate, origin: RequestOrigin) -> UserProfile:
        profile = store.create_profile(UserProfile(id=generate_id("profile"), **data.model_dump()))
        logger.info("Created profile %s for user %s", profile.id, profile.user_id)
        await AuditService.log(
            store,
            user_id=profile.user_id,
            action="profile.created",
            resource_type="profile",
            resource_id=profile.id,
            origin=origin,
        )
        return profile

    @classmethod
    async def get_profile(cls, store: Store, user_id: str) -> UserProfile:
        return store.get_profile_by_user_id(user_id)

    @classmethod
    async def update_profile(
        cls, store: Store, user_id: str, data: ProfileUpdate, origin: RequestOrigin
    ) -> UserProfile:
        """Replace the profile of ``user_id``; its profile ID is kept."""
        # The store substitutes the existing profile's ID for this placeholder.
        replacement = UserProfile(id="", user_id=user_id, **data.model_dump())
        profile = store.update_profile(user_id, replacement)
        await AuditService.log(
            store,
            user_id=user_id,
            action="profile.updated",
            resource_type="profile",
            resource_id=profile.id,
            origin=origin,
        )
        return profile
