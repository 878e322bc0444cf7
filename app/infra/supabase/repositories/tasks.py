"""Task repository"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from postgrest.exceptions import APIError
from supabase import Client  # type: ignore

from app.models.task import Task, TaskCreate, TaskCreateResult, TaskStatus, TaskUpdate

from .base import BaseRepository

logger = logging.getLogger(__name__)


class TaskRepository(BaseRepository[Task, TaskCreate, TaskUpdate]):
    """Repository for task operations"""

    def __init__(self, client: Client):
        super().__init__(client, "tasks", Task)

    async def find_by_tenant(
        self,
        tenant_id: str,
        status: Optional[TaskStatus] = None,
        competence: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> List[Task]:
        """Tasks of a tenant, earliest due first, optionally narrowed by status, competence or client"""
        filters = {"tenant_id": tenant_id}
        if status is not None:
            filters["status"] = TaskStatus(status).value
        if competence is not None:
            filters["competence"] = competence
        if client_id is not None:
            filters["client_id"] = client_id

        return await self.find_by_filters(filters, order_by="due_date")

    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        """
        Move a task to a new status.

        Completing stamps completed_at; any other status (reopening) clears it.

        Returns:
            The updated task, or None if it does not exist
        """
        status = TaskStatus(status)
        completed_at = (
            datetime.now(timezone.utc).isoformat() if status == TaskStatus.COMPLETED else None
        )
        response = (
            self._client.table(self._table_name)
            .update({"status": status.value, "completed_at": completed_at})
            .eq("id", task_id)
            .execute()
        )

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def exists_for_competence(
        self,
        tenant_id: str,
        client_id: str,
        template_id: str,
        competence: str,
    ) -> bool:
        """Whether a task was already generated for this template, client and competence"""
        response = (
            self._client.table(self._table_name)
            .select("id")
            .eq("tenant_id", tenant_id)
            .eq("client_id", client_id)
            .eq("template_id", template_id)
            .eq("competence", competence)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    async def create_from_template(self, data: TaskCreate) -> TaskCreateResult:
        """
        Insert a generated task.

        Storage errors (constraint violations, rejected inserts) are returned
        as the result's `error` instead of being raised. Only the inserted
        row's id is read back, so an accepted insert is always reported as
        created.

        Args:
            data: The task to insert

        Returns:
            TaskCreateResult with the new task id or the error message
        """
        try:
            response = (
                self._client.table(self._table_name)
                .insert(data.model_dump(mode='json'))
                .execute()
            )
        except APIError as e:
            logger.warning(f"Insert into {self._table_name} rejected: {e.message}")
            return TaskCreateResult(error=e.message or str(e))

        if not response.data:
            return TaskCreateResult(error="Task insert returned no row")

        return TaskCreateResult(id=str(response.data[0].get("id")))
