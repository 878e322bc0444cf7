"""Task template repository"""
from typing import List

from supabase import Client  # type: ignore

from app.models.task_template import TaskTemplate, TaskTemplateCreate, TaskTemplateUpdate

from .base import BaseRepository


class TaskTemplateRepository(BaseRepository[TaskTemplate, TaskTemplateCreate, TaskTemplateUpdate]):
    """Repository for task template operations"""

    def __init__(self, client: Client):
        super().__init__(client, "task_templates", TaskTemplate)

    async def find_by_tenant(self, tenant_id: str) -> List[TaskTemplate]:
        """All templates of a tenant, active or not, by name"""
        return await self.find_by_filters({"tenant_id": tenant_id}, order_by="name")

    async def find_active_by_tenant(self, tenant_id: str) -> List[TaskTemplate]:
        """Active templates of a tenant, the input set of task generation"""
        return await self.find_by_filters({"tenant_id": tenant_id, "active": True}, order_by="name")
