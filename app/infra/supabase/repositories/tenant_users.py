"""Tenant user repository"""
from typing import Optional

from pydantic import BaseModel
from supabase import Client  # type: ignore

from app.models.tenant_user import TenantUser

from .base import BaseRepository


class TenantUserRepository(BaseRepository[TenantUser, BaseModel, BaseModel]):
    """Repository for tenant membership lookups"""

    def __init__(self, client: Client):
        super().__init__(client, "tenant_users", TenantUser)

    async def find_active_by_user(self, user_id: str) -> Optional[TenantUser]:
        """Active membership of an authenticated user, if any"""
        memberships = await self.find_by_filters({"user_id": user_id, "active": True}, limit=1)
        return memberships[0] if memberships else None
