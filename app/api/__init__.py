# API module exports
from app.api import clients, health, task_generation, task_templates, tasks
from app.api.base import api_router

__all__ = ["clients", "health", "task_generation", "task_templates", "tasks", "api_router"]
