"""Recurring task services"""
from app.services.task.generation_planner import generate_tasks
from app.services.task.task_generation_service import TaskGenerationService
from app.services.task.task_service import TaskService
from app.services.task.task_template_service import TaskTemplateService

__all__ = ["generate_tasks", "TaskGenerationService", "TaskService", "TaskTemplateService"]
