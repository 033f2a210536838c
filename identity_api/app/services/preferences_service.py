"""
Service layer for user preferences.

Preferences are keyed by user ID.  Creating preferences for a user who
already has some replaces them (upsert); updating requires existing
preferences and keeps their ID.
"""

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.preferences import PreferencesCreate, PreferencesUpdate, UserPreferences
from identity_api.app.services.audit_service import AuditService


class PreferencesService:
    """Service for user preferences."""

    @classmethod
    async def create_preferences(
        cls, store: Store, data: PreferencesCreate, origin: RequestOrigin
    ) -> UserPreferences:
        prefs = store.create_preferences(UserPreferences(id=generate_id("pref"), **data.model_dump()))
        await AuditService.log(
            store,
            user_id=prefs.user_id,
            action="preferences.created",
            resource_type="preferences",
            resource_id=prefs.id,
            origin=origin,
        )
        return prefs

    @classmethod
    async def get_preferences(cls, store: Store, user_id: str) -> UserPreferences:
        return store.get_preferences(user_id)

    @classmethod
    async def update_preferences(
        cls, store: Store, user_id: str, data: PreferencesUpdate, origin: RequestOrigin
    ) -> UserPreferences:
        # The store keeps the existing preferences' ID in place of this one.
        replacement = UserPreferences(id="", user_id=user_id, **data.model_dump())
        prefs = store.update_preferences(user_id, replacement)
        await AuditService.log(
            store,
            user_id=user_id,
            action="preferences.updated",
            resource_type="preferences",
            resource_id=prefs.id,
            origin=origin,
        )
        return prefs
