"""
Client Service

Tenant-scoped registration and maintenance of the office's clients. Only
active clients take part in task generation.
"""

import logging
from typing import List, Optional

from supabase import Client as SupabaseClient

from app.infra.supabase.repositories import ClientRepository
from app.models.client import Client, ClientBase, ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


class ClientService:
    """Service for managing a tenant's clients"""

    def __init__(self, supabase_client: SupabaseClient):
        self.client_repo = ClientRepository(supabase_client)

    async def list_clients(self, tenant_id: str, include_inactive: bool = False) -> List[Client]:
        if include_inactive:
            return await self.client_repo.find_by_tenant(tenant_id)
        return await self.client_repo.find_active_by_tenant(tenant_id)

    async def get_client(self, tenant_id: str, client_id: str) -> Optional[Client]:
        """
        Get a client of the tenant.

        Returns:
            The client, or None if missing or served by another tenant
        """
        client = await self.client_repo.find_by_id(client_id)
        if not client or client.tenant_id != tenant_id:
            return None
        return client

    async def create_client(self, tenant_id: str, fields: ClientBase) -> Client:
        client = await self.client_repo.create(
            ClientCreate(tenant_id=tenant_id, **fields.model_dump())
        )
        logger.info(f"Registered client {client.id} for tenant {tenant_id}")
        return client

    async def update_client(
        self,
        tenant_id: str,
        client_id: str,
        updates: ClientUpdate,
    ) -> Optional[Client]:
        existing = await self.get_client(tenant_id, client_id)
        if not existing:
            return None

        client = await self.client_repo.update(client_id, updates)
        if client:
            logger.info(f"Updated client {client_id}")
        return client
