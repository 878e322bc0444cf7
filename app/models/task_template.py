"""Task template domain model"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class RecurrenceCadence(str, Enum):
    """How often a template's obligation recurs"""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class TaxRegime(str, Enum):
    """Client taxation regimes"""
    SIMPLES_NACIONAL = "simples_nacional"
    LUCRO_PRESUMIDO = "lucro_presumido"
    LUCRO_REAL = "lucro_real"


class TaskTemplateBase(BaseModel):
    """Base template fields for creation"""
    name: str
    description: Optional[str] = None
    recurrence: RecurrenceCadence = RecurrenceCadence.MONTHLY
    due_day: int = Field(ge=1, le=31)
    adjust_to_business_day: bool = False
    applicable_regimes: List[TaxRegime] = Field(default_factory=list)
    active: bool = True


class TaskTemplateCreate(TaskTemplateBase):
    """Template creation model"""
    tenant_id: str


class TaskTemplateUpdate(BaseModel):
    """Template update model - all fields optional"""
    name: Optional[str] = None
    description: Optional[str] = None
    recurrence: Optional[RecurrenceCadence] = None
    due_day: Optional[int] = Field(None, ge=1, le=31)
    adjust_to_business_day: Optional[bool] = None
    applicable_regimes: Optional[List[TaxRegime]] = None
    active: Optional[bool] = None


class TaskTemplate(TaskTemplateBase):
    """Complete template model from database"""
    id: str
    tenant_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    def applies_to(self, regime: Optional[TaxRegime]) -> bool:
        """A template with no regimes applies to everyone; clients without a regime always pass"""
        if not self.applicable_regimes or regime is None:
            return True
        return regime in self.applicable_regimes
