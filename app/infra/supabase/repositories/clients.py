"""Client repository"""
from typing import List

from supabase import Client as SupabaseClient  # type: ignore

from app.models.client import Client, ClientCreate, ClientUpdate

from .base import BaseRepository


class ClientRepository(BaseRepository[Client, ClientCreate, ClientUpdate]):
    """Repository for a tenant's clients"""

    def __init__(self, client: SupabaseClient):
        super().__init__(client, "clients", Client)

    async def find_by_tenant(self, tenant_id: str) -> List[Client]:
        """All clients of a tenant, active or not, by legal name"""
        return await self.find_by_filters({"tenant_id": tenant_id}, order_by="legal_name")

    async def find_active_by_tenant(self, tenant_id: str) -> List[Client]:
        """Active clients of a tenant, the input set of task generation"""
        return await self.find_by_filters(
            {"tenant_id": tenant_id, "active": True}, order_by="legal_name"
        )
