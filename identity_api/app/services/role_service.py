"""
Service layer for role management.

Roles define the permissions granted to users.  Permission strings are
stored for clients to interpret; ``"*"`` grants everything.  The two
built-in roles (Admin and User) are seeded when the application starts.
"""

import logging
from typing import List

from identity_api.app.core.deps import RequestOrigin
from identity_api.app.core.ids import generate_id
from identity_api.app.core.store import Store
from identity_api.app.schemas.role import Role, RoleCreate
from identity_api.app.services.audit_service import AuditService


class RoleService:
    """Service for managing roles."""

    @classmethod
    async def list_roles(cls, store: Store) -> List[Role]:
        return store.list_roles()

    @classmethod
    async def get_role(cls, store: Store, role_id: str) -> Role:
        return store.get_role(role_id)

    @classmethod
    async def create_role(cls, store: Store, data: RoleCreate, origin: RequestOrigin) -> Role:
        logger = logging.getLogger(__name__)
        role = store.create_role(Role(id=generate_id("role"), **data.model_dump()))
        logger.info("Role %s created as %s", role.name, role.id)
        await AuditService.log(
            store,
            user_id=None,
            action="role.created",
            resource_type="role",
            resource_id=role.id,
            origin=origin,
        )
        return role
