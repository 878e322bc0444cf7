import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from supabase import Client

from app import config
from app.infra.supabase import get_supabase_client
from app.middleware.auth import get_current_tenant_id, get_current_user_id
from app.models.competence import COMPETENCE_PATTERN, CompetenceString
from app.services.task import TaskGenerationService
from app.utils.datetime_helper import format_date_br
from app.utils.recurrence_calculator import calculate_due_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/task-generation", tags=["task-generation"])


class GenerateTasksRequest(BaseModel):
    competence: CompetenceString


class GenerateTasksResponse(BaseModel):
    competence: str
    success_count: int
    error_count: int
    errors: List[str]
    display_errors: List[str]


class DueDateResponse(BaseModel):
    competence: str
    due_date: date
    due_date_display: str


def get_task_generation_service(
    client: Client = Depends(get_supabase_client),
) -> TaskGenerationService:
    return TaskGenerationService(client)


@router.post("", response_model=GenerateTasksResponse)
async def run_task_generation(
    request: GenerateTasksRequest,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskGenerationService = Depends(get_task_generation_service),
):
    """
    Generate the tasks of a competence for the caller's tenant.

    Every active template is matched against every active client. Tasks
    that already exist are skipped, so running the same competence twice
    only creates what is missing.

    Raises:
        400: Competence month/year out of range
        500: Templates, clients or existing tasks could not be read
    """
    try:
        outcome = await service.generate_for_competence(tenant_id, request.competence)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Task generation failed for tenant {tenant_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to generate tasks: {str(e)}")

    return {
        "competence": request.competence,
        "success_count": outcome.success_count,
        "error_count": len(outcome.errors),
        "errors": outcome.errors,
        "display_errors": outcome.display_errors(config.GENERATION_ERROR_DISPLAY_LIMIT),
    }


@router.get("/due-date", response_model=DueDateResponse)
async def preview_due_date(
    competence: str = Query(..., pattern=COMPETENCE_PATTERN.pattern),
    day_of_month: int = Query(..., ge=1, le=31),
    adjust_to_business_day: bool = False,
    user_id: str = Depends(get_current_user_id),
):
    """Due date a template with these settings would get for a competence"""
    try:
        due_date = calculate_due_date(competence, day_of_month, adjust_to_business_day)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "competence": competence,
        "due_date": due_date,
        "due_date_display": format_date_br(due_date),
    }
