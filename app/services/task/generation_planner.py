"""
Task Generation Planner

Turns active templates x active clients into task instances for one
competence period:
- Tax-regime eligibility filtering
- Idempotency via an injected existence check
- Due-date resolution
- Per-client failure collection without aborting the batch
"""

import logging
from typing import Awaitable, Callable, Sequence

from app.models.client import Client
from app.models.generation import GenerationOutcome
from app.models.task import TaskCreate, TaskCreateResult, TaskPriority, TaskStatus
from app.models.task_template import TaskTemplate
from app.utils.competence import parse_competence
from app.utils.recurrence_calculator import calculate_due_date

logger = logging.getLogger(__name__)

NO_ACTIVE_TEMPLATES = "No active templates found"
NO_ACTIVE_CLIENTS = "No active clients found"

# (tenant_id, client_id, template_id, competence) -> already generated?
ExistsCheck = Callable[[str, str, str, str], Awaitable[bool]]
CreateInstance = Callable[[TaskCreate], Awaitable[TaskCreateResult]]


def build_task(template: TaskTemplate, client: Client, competence: str) -> TaskCreate:
    """Task record for one (template, client) pair, title and description copied from the template"""
    due_date = calculate_due_date(competence, template.due_day, template.adjust_to_business_day)
    return TaskCreate(
        tenant_id=template.tenant_id,
        client_id=client.id,
        template_id=template.id,
        title=template.name,
        description=template.description,
        competence=competence,
        due_date=due_date,
        status=TaskStatus.PENDING,
        priority=TaskPriority.MEDIUM,
    )


async def generate_tasks(
    templates: Sequence[TaskTemplate],
    clients: Sequence[Client],
    competence: str,
    exists_check: ExistsCheck,
    create_instance: CreateInstance,
) -> GenerationOutcome:
    """
    Generate the tasks of a competence period.

    Templates and clients must already be restricted to one tenant and to
    active rows. Pairs are processed one at a time in the given order; each
    existence check and insert is awaited before moving on.

    Args:
        templates: Active templates of the tenant
        clients: Active clients of the tenant
        competence: Competence string "MM/YYYY"
        exists_check: Returns True when the task was already generated
        create_instance: Inserts a task and reports the id or an error

    Returns:
        GenerationOutcome with the number of created tasks and one message
        per failed insert

    Raises:
        ValueError: If the competence string cannot be parsed
    """
    if not templates:
        return GenerationOutcome(errors=[NO_ACTIVE_TEMPLATES])

    if not clients:
        return GenerationOutcome(errors=[NO_ACTIVE_CLIENTS])

    # Fail before touching storage
    parse_competence(competence)

    outcome = GenerationOutcome()

    for template in templates:
        for client in clients:
            if not template.applies_to(client.tax_regime):
                continue

            if await exists_check(template.tenant_id, client.id, template.id, competence):
                continue

            task = build_task(template, client, competence)

            try:
                result = await create_instance(task)
                error = result.error
            except Exception as e:
                error = str(e)

            if error is not None:
                logger.error(
                    f"Error creating task from template {template.id} for client {client.id}: {error}"
                )
                outcome.errors.append(f"Error creating task for {client.legal_name}: {error}")
                continue

            outcome.success_count += 1

    return outcome
