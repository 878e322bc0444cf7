"""
Task Service

Tenant-scoped listing and editing of generated tasks. Listings carry each
task's urgency (days until due, overdue) computed against Brasília time.
"""

import logging
from datetime import date
from typing import List, Optional

from supabase import Client

from app.infra.supabase.repositories import TaskRepository
from app.models.task import Task, TaskListItem, TaskStatus, TaskUpdate
from app.utils.competence import parse_competence
from app.utils.datetime_helper import days_until, today_brt

logger = logging.getLogger(__name__)


def to_list_item(task: Task, today: date) -> TaskListItem:
    """Attach urgency to a task; completed tasks are never overdue"""
    remaining = days_until(task.due_date, today=today)
    return TaskListItem(
        **task.model_dump(),
        days_until=remaining,
        overdue=task.status != TaskStatus.COMPLETED and remaining < 0,
    )


class TaskService:
    """Service for browsing and working generated tasks"""

    def __init__(self, supabase_client: Client):
        self.task_repo = TaskRepository(supabase_client)

    async def list_tasks(
        self,
        tenant_id: str,
        status: Optional[TaskStatus] = None,
        competence: Optional[str] = None,
        client_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[TaskListItem]:
        """
        List a tenant's tasks, earliest due first.

        Args:
            tenant_id: Caller's tenant
            status: Only tasks in this status
            competence: Only tasks of this competence ("MM/YYYY")
            client_id: Only tasks of this client
            today: Reference day for urgency (defaults to today in Brasília)

        Raises:
            ValueError: competence is malformed or out of range
        """
        if competence is not None:
            competence = str(parse_competence(competence))

        tasks = await self.task_repo.find_by_tenant(
            tenant_id, status=status, competence=competence, client_id=client_id
        )

        if today is None:
            today = today_brt()
        return [to_list_item(task, today) for task in tasks]

    async def get_task(self, tenant_id: str, task_id: str) -> Optional[Task]:
        """
        Get a task owned by the tenant.

        Returns:
            The task, or None if missing or owned by another tenant
        """
        task = await self.task_repo.find_by_id(task_id)
        if not task or task.tenant_id != tenant_id:
            return None
        return task

    async def update_task(self, tenant_id: str, task_id: str, updates: TaskUpdate) -> Optional[Task]:
        existing = await self.get_task(tenant_id, task_id)
        if not existing:
            return None

        task = await self.task_repo.update(task_id, updates)
        if task:
            logger.info(f"Updated task {task_id}")
        return task

    async def change_status(self, tenant_id: str, task_id: str, status: TaskStatus) -> Optional[Task]:
        existing = await self.get_task(tenant_id, task_id)
        if not existing:
            return None

        task = await self.task_repo.update_status(task_id, status)
        if task:
            logger.info(f"Task {task_id} moved from {existing.status.value} to {task.status.value}")
        return task
