"""
Permission catalog and per-user grants.

The catalog lists the permissions that can be granted; five are
seeded at startup.  Grants are kept per user in the order they were
made.  Revoking removes the first grant of the given permission only,
leaving any duplicate grants and all other grants in place.
Permissions are recorded, not enforced.
"""

import logging
from typing import List

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.permission import (
    Permission,
    PermissionCreate,
    UserPermission,
    UserPermissionGrant,
)
from identity_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class PermissionService:
    """Service for permissions and grants."""

    @classmethod
    async def list_permissions(cls, store: Store) -> List[Permission]:
        return store.list_permissions()

    @classmethod
    async def get_permission(cls, store: Store, permission_id: str) -> Permission:
        return store.get_permission(permission_id)

    @classmethod
    async def create_permission(cls, store: Store, data: PermissionCreate, origin: RequestOrigin) -> Permission:
        permission = store.create_permission(Permission(id=generate_id("perm"), **data.model_dump()))
        logger.info("Permission %s added to the catalog", permission.name)
        await AuditService.log(
            store,
            user_id=None,
            action="permission.created",
            resource_type="permission",
            resource_id=permission.id,
            origin=origin,
        )
        return permission

    @classmethod
    async def grant(
        cls, store: Store, user_id: str, data: UserPermissionGrant, origin: RequestOrigin
    ) -> UserPermission:
        """Grant a catalog permission to a user.

        Raises ``NotFoundError`` if the permission is not in the catalog.
        """
        grant = store.grant_user_permission(
            UserPermission(id=generate_id("userperm"), user_id=user_id, **data.model_dump())
        )
        await AuditService.log(
            store,
            user_id=data.granted_by or None,
            action="permission.granted",
            resource_type="user",
            resource_id=user_id,
            origin=origin,
            details={"permission_id": data.permission_id, "target_user": user_id},
        )
        return grant

    @classmethod
    async def list_user_permissions(cls, store: Store, user_id: str) -> List[UserPermission]:
        return store.get_user_permissions(user_id)

    @classmethod
    async def revoke(cls, store: Store, user_id: str, permission_id: str, origin: RequestOrigin) -> UserPermission:
        """Revoke one grant.  Raises ``NotFoundError`` if none matches."""
        grant = store.revoke_user_permission(user_id, permission_id)
        await AuditService.log(
            store,
            user_id=None,
            action="permission.revoked",
            resource_type="user",
            resource_id=user_id,
            origin=origin,
            details={"permission_id": permission_id, "target_user": user_id},
        )
        return grant
