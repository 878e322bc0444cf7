"""
Task Template Service

Tenant-scoped management of recurring obligation templates and their
yearly due-date schedule.
"""

import logging
from datetime import date
from typing import List, Optional

from supabase import Client

from app.infra.supabase.repositories import TaskTemplateRepository
from app.models.generation import ScheduledOccurrence
from app.models.task_template import (
    TaskTemplate,
    TaskTemplateBase,
    TaskTemplateCreate,
    TaskTemplateUpdate,
)
from app.utils.datetime_helper import days_until, format_date_br, is_overdue, today_brt
from app.utils.recurrence_calculator import calculate_due_date, months_for_recurrence

logger = logging.getLogger(__name__)


class TaskTemplateService:
    """Service for managing task templates"""

    def __init__(self, supabase_client: Client):
        self.template_repo = TaskTemplateRepository(supabase_client)

    async def list_templates(self, tenant_id: str, include_inactive: bool = False) -> List[TaskTemplate]:
        if include_inactive:
            return await self.template_repo.find_by_tenant(tenant_id)
        return await self.template_repo.find_active_by_tenant(tenant_id)

    async def get_template(self, tenant_id: str, template_id: str) -> Optional[TaskTemplate]:
        """
        Get a template owned by the tenant.

        Returns:
            The template, or None if missing or owned by another tenant
        """
        template = await self.template_repo.find_by_id(template_id)
        if not template or template.tenant_id != tenant_id:
            return None
        return template

    async def create_template(self, tenant_id: str, fields: TaskTemplateBase) -> TaskTemplate:
        template = await self.template_repo.create(
            TaskTemplateCreate(tenant_id=tenant_id, **fields.model_dump())
        )
        logger.info(f"Created task template {template.id} for tenant {tenant_id}")
        return template

    async def update_template(
        self,
        tenant_id: str,
        template_id: str,
        updates: TaskTemplateUpdate,
    ) -> Optional[TaskTemplate]:
        existing = await self.get_template(tenant_id, template_id)
        if not existing:
            return None

        template = await self.template_repo.update(template_id, updates)
        if template:
            logger.info(f"Updated task template {template_id}")
        return template

    async def delete_template(self, tenant_id: str, template_id: str) -> bool:
        existing = await self.get_template(tenant_id, template_id)
        if not existing:
            return False

        success = await self.template_repo.delete(template_id)
        if success:
            logger.info(f"Deleted task template {template_id}")
        return success

    def build_schedule(
        self,
        template: TaskTemplate,
        year: int,
        today: Optional[date] = None,
    ) -> List[ScheduledOccurrence]:
        """
        Due dates of a template for every competence of its cadence in a year.

        Args:
            template: The template to schedule
            year: Competence year (due dates of December fall in January of year + 1)
            today: Reference day for days_until/overdue (defaults to today in BRT)

        Returns:
            One occurrence per competence, chronological
        """
        if today is None:
            today = today_brt()

        occurrences = []
        for period in months_for_recurrence(year, template.recurrence):
            competence = str(period)
            due_date = calculate_due_date(
                competence, template.due_day, template.adjust_to_business_day
            )
            remaining = days_until(due_date, today)
            occurrences.append(
                ScheduledOccurrence(
                    competence=competence,
                    due_date=due_date,
                    due_date_display=format_date_br(due_date),
                    days_until=remaining,
                    overdue=is_overdue(due_date, today),
                )
            )
        return occurrences
