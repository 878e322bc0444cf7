import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from supabase import Client

from app.infra.supabase import get_supabase_client
from app.middleware.auth import get_current_tenant_id
from app.models.competence import COMPETENCE_PATTERN
from app.models.task import Task, TaskListItem, TaskStatus, TaskStatusUpdate, TaskUpdate
from app.services.task import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


class TaskResponse(BaseModel):
    task: Task


class TaskListResponse(BaseModel):
    tasks: List[TaskListItem]
    count: int
    overdue_count: int


def get_task_service(client: Client = Depends(get_supabase_client)) -> TaskService:
    return TaskService(client)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    status: Optional[TaskStatus] = None,
    competence: Optional[str] = Query(None, pattern=COMPETENCE_PATTERN.pattern),
    client_id: Optional[str] = None,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskService = Depends(get_task_service),
):
    """
    List the tenant's tasks, earliest due first.

    Each row carries `days_until` (negative once past due) and `overdue`
    (never set on completed tasks).
    """
    try:
        tasks = await service.list_tasks(
            tenant_id, status=status, competence=competence, client_id=client_id
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "tasks": tasks,
        "count": len(tasks),
        "overdue_count": sum(1 for task in tasks if task.overdue),
    }


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskService = Depends(get_task_service),
):
    task = await service.get_task(tenant_id, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"task": task}


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: TaskUpdate,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskService = Depends(get_task_service),
):
    task = await service.update_task(tenant_id, task_id, request)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"task": task}


@router.patch("/{task_id}/status", response_model=TaskResponse)
async def change_task_status(
    task_id: str,
    request: TaskStatusUpdate,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskService = Depends(get_task_service),
):
    """Move a task through its workflow; completing it records completed_at"""
    task = await service.change_status(tenant_id, task_id, request.status)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"task": task}
