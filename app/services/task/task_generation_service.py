"""
Task Generation Service

Loads a tenant's active templates and clients from Supabase and runs the
generation planner against the tasks table.
"""

import logging

from supabase import Client

from app.infra.supabase.repositories import RepositoryFactory
from app.models.generation import GenerationOutcome
from app.services.task.generation_planner import generate_tasks
from app.utils.competence import parse_competence

logger = logging.getLogger(__name__)


class TaskGenerationService:
    """Service for generating recurring tasks per competence period"""

    def __init__(self, supabase_client: Client):
        self.repositories = RepositoryFactory(supabase_client)

    async def generate_for_competence(self, tenant_id: str, competence: str) -> GenerationOutcome:
        """
        Generate every missing task of a competence for a tenant.

        Args:
            tenant_id: The tenant to generate for
            competence: Competence string "MM/YYYY"

        Returns:
            Summary of created tasks and per-client failures

        Raises:
            ValueError: competence is malformed or out of range, checked
                before anything is read from storage
        """
        parse_competence(competence)

        templates = await self.repositories.task_templates.find_active_by_tenant(tenant_id)
        clients = await self.repositories.clients.find_active_by_tenant(tenant_id)

        logger.info(
            f"Generating tasks for tenant {tenant_id}, competence {competence}: "
            f"{len(templates)} templates x {len(clients)} clients"
        )

        tasks = self.repositories.tasks
        outcome = await generate_tasks(
            templates,
            clients,
            competence,
            exists_check=tasks.exists_for_competence,
            create_instance=tasks.create_from_template,
        )

        logger.info(
            f"Generated {outcome.success_count} tasks for tenant {tenant_id}, "
            f"competence {competence} ({len(outcome.errors)} errors)"
        )
        return outcome
