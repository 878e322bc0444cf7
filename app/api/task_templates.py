import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from supabase import Client

from app.infra.supabase import get_supabase_client
from app.middleware.auth import get_current_tenant_id
from app.models.generation import ScheduledOccurrence
from app.models.task_template import TaskTemplate, TaskTemplateBase, TaskTemplateUpdate
from app.services.task import TaskTemplateService
from app.utils.datetime_helper import today_brt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/task-templates", tags=["task-templates"])


class TaskTemplateResponse(BaseModel):
    template: TaskTemplate


class TaskTemplateListResponse(BaseModel):
    templates: List[TaskTemplate]
    count: int


class ScheduleResponse(BaseModel):
    template_id: str
    year: int
    occurrences: List[ScheduledOccurrence]


class DeleteResponse(BaseModel):
    success: bool
    message: str


def get_task_template_service(
    client: Client = Depends(get_supabase_client),
) -> TaskTemplateService:
    return TaskTemplateService(client)


@router.get("", response_model=TaskTemplateListResponse)
async def list_templates(
    include_inactive: bool = False,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskTemplateService = Depends(get_task_template_service),
):
    """List the tenant's templates (active only unless include_inactive)"""
    templates = await service.list_templates(tenant_id, include_inactive=include_inactive)
    return {"templates": templates, "count": len(templates)}


@router.get("/{template_id}", response_model=TaskTemplateResponse)
async def get_template(
    template_id: str,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskTemplateService = Depends(get_task_template_service),
):
    template = await service.get_template(tenant_id, template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return {"template": template}


@router.post("", response_model=TaskTemplateResponse)
async def create_template(
    request: TaskTemplateBase,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskTemplateService = Depends(get_task_template_service),
):
    """Create a template for the caller's tenant"""
    try:
        template = await service.create_template(tenant_id, request)
    except ValueError as e:
        logger.error(f"Failed to create template for tenant {tenant_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {"template": template}


@router.put("/{template_id}", response_model=TaskTemplateResponse)
async def update_template(
    template_id: str,
    request: TaskTemplateUpdate,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskTemplateService = Depends(get_task_template_service),
):
    template = await service.update_template(tenant_id, template_id, request)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return {"template": template}


@router.delete("/{template_id}", response_model=DeleteResponse)
async def delete_template(
    template_id: str,
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskTemplateService = Depends(get_task_template_service),
):
    success = await service.delete_template(tenant_id, template_id)
    if not success:
        raise HTTPException(status_code=404, detail="Template not found")
    return {"success": True, "message": "Template deleted successfully"}


@router.get("/{template_id}/schedule", response_model=ScheduleResponse)
async def get_template_schedule(
    template_id: str,
    year: Optional[int] = Query(None, ge=1, le=9998),
    tenant_id: str = Depends(get_current_tenant_id),
    service: TaskTemplateService = Depends(get_task_template_service),
):
    """
    Yearly due-date schedule of a template.

    Lists every competence of the template's cadence in `year` (defaults to
    the current year) with its due date and how many days remain.
    """
    template = await service.get_template(tenant_id, template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")

    if year is None:
        year = today_brt().year

    return {
        "template_id": template.id,
        "year": year,
        "occurrences": service.build_schedule(template, year),
    }
