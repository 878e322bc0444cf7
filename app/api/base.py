from fastapi import APIRouter
from app.api import clients, health, task_generation, task_templates, tasks

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(clients.router)
api_router.include_router(task_templates.router)
api_router.include_router(task_generation.router)
api_router.include_router(tasks.router)
