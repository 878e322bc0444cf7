"""Tenant membership model"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class TenantRole(str, Enum):
    ADMIN_MASTER = "admin_master"
    MANAGER = "manager"
    MEMBER = "member"


class TenantUser(BaseModel):
    """Links an authenticated user to the tenant they work for"""
    id: str
    tenant_id: str
    user_id: str
    name: str
    role: TenantRole = TenantRole.MEMBER
    active: bool = True
    created_at: Optional[datetime] = None
