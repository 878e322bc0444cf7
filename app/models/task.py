"""Task domain model"""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    WAITING_CLIENT = "waiting_client"
    REVIEW = "review"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskBase(BaseModel):
    """Base task fields for creation"""
    title: str
    description: Optional[str] = None
    competence: str
    due_date: date
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM


class TaskCreate(TaskBase):
    """Task creation model"""
    tenant_id: str
    client_id: str
    template_id: Optional[str] = None


class Task(TaskBase):
    """Complete task model from database"""
    id: str
    tenant_id: str
    client_id: str
    template_id: Optional[str] = None
    assignee_id: Optional[str] = None
    notes: Optional[str] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TaskUpdate(BaseModel):
    """Task edit model - all fields optional; status changes go through TaskStatusUpdate"""
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None
    assignee_id: Optional[str] = None
    notes: Optional[str] = None


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskListItem(Task):
    """Task row with due-date urgency for listings"""
    days_until: int
    overdue: bool


class TaskCreateResult(BaseModel):
    """Outcome of inserting one task: the new id, or the storage error message"""
    id: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
