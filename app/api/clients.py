import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from supabase import Client as SupabaseClient

from app.infra.supabase import get_supabase_client
from app.middleware.auth import get_current_tenant_id
from app.models.client import Client, ClientBase, ClientUpdate
from app.services.client_service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clients", tags=["clients"])


class ClientResponse(BaseModel):
    client: Client


class ClientListResponse(BaseModel):
    clients: List[Client]
    count: int


def get_client_service(client: SupabaseClient = Depends(get_supabase_client)) -> ClientService:
    return ClientService(client)


@router.get("", response_model=ClientListResponse)
async def list_clients(
    include_inactive: bool = False,
    tenant_id: str = Depends(get_current_tenant_id),
    service: ClientService = Depends(get_client_service),
):
    """List the tenant's clients (active only unless include_inactive)"""
    clients = await service.list_clients(tenant_id, include_inactive=include_inactive)
    return {"clients": clients, "count": len(clients)}


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    tenant_id: str = Depends(get_current_tenant_id),
    service: ClientService = Depends(get_client_service),
):
    client = await service.get_client(tenant_id, client_id)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return {"client": client}


@router.post("", response_model=ClientResponse)
async def create_client(
    request: ClientBase,
    tenant_id: str = Depends(get_current_tenant_id),
    service: ClientService = Depends(get_client_service),
):
    """Register a client for the caller's tenant"""
    try:
        client = await service.create_client(tenant_id, request)
    except ValueError as e:
        logger.error(f"Failed to register client for tenant {tenant_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {"client": client}


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    request: ClientUpdate,
    tenant_id: str = Depends(get_current_tenant_id),
    service: ClientService = Depends(get_client_service),
):
    client = await service.update_client(tenant_id, client_id, request)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return {"client": client}
