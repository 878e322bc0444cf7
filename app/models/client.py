"""Client (taxpayer) domain model"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .task_template import TaxRegime


class PersonType(str, Enum):
    """Legal entity (CNPJ) or individual (CPF)"""
    PJ = "PJ"
    PF = "PF"


class ClientBase(BaseModel):
    """Client fields editable by the tenant"""
    legal_name: str
    trade_name: Optional[str] = None
    person_type: PersonType = PersonType.PJ
    tax_id: Optional[str] = None
    tax_regime: Optional[TaxRegime] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: bool = True


class ClientCreate(ClientBase):
    tenant_id: str


class ClientUpdate(BaseModel):
    """Client update model - all fields optional"""
    legal_name: Optional[str] = None
    trade_name: Optional[str] = None
    person_type: Optional[PersonType] = None
    tax_id: Optional[str] = None
    tax_regime: Optional[TaxRegime] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: Optional[bool] = None


class Client(ClientBase):
    """Client served by a tenant"""
    id: str
    tenant_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
