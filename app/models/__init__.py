"""Domain models for the application"""
from .competence import CompetencePeriod, CompetenceString, validate_competence_format
from .task_template import (
    RecurrenceCadence,
    TaxRegime,
    TaskTemplate,
    TaskTemplateCreate,
    TaskTemplateUpdate,
)
from .client import Client, ClientCreate, ClientUpdate, PersonType
from .task import (
    Task,
    TaskCreate,
    TaskCreateResult,
    TaskListItem,
    TaskPriority,
    TaskStatus,
    TaskStatusUpdate,
    TaskUpdate,
)
from .tenant_user import TenantRole, TenantUser
from .generation import GenerationOutcome, ScheduledOccurrence

__all__ = [
    'CompetencePeriod', 'CompetenceString', 'validate_competence_format',
    'RecurrenceCadence', 'TaxRegime',
    'TaskTemplate', 'TaskTemplateCreate', 'TaskTemplateUpdate',
    'Client', 'ClientCreate', 'ClientUpdate', 'PersonType',
    'Task', 'TaskCreate', 'TaskCreateResult', 'TaskListItem',
    'TaskPriority', 'TaskStatus', 'TaskStatusUpdate', 'TaskUpdate',
    'TenantRole', 'TenantUser',
    'GenerationOutcome', 'ScheduledOccurrence',
]
