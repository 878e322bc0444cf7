"""Repository factory and exports"""
from supabase import Client

from .clients import ClientRepository
from .task_templates import TaskTemplateRepository
from .tasks import TaskRepository
from .tenant_users import TenantUserRepository


class RepositoryFactory:
    """Factory for creating repository instances"""

    def __init__(self, client: Client):
        self._client = client
        self._task_templates: TaskTemplateRepository = None
        self._clients: ClientRepository = None
        self._tasks: TaskRepository = None
        self._tenant_users: TenantUserRepository = None

    @property
    def task_templates(self) -> TaskTemplateRepository:
        if self._task_templates is None:
            self._task_templates = TaskTemplateRepository(self._client)
        return self._task_templates

    @property
    def clients(self) -> ClientRepository:
        if self._clients is None:
            self._clients = ClientRepository(self._client)
        return self._clients

    @property
    def tasks(self) -> TaskRepository:
        if self._tasks is None:
            self._tasks = TaskRepository(self._client)
        return self._tasks

    @property
    def tenant_users(self) -> TenantUserRepository:
        if self._tenant_users is None:
            self._tenant_users = TenantUserRepository(self._client)
        return self._tenant_users


__all__ = [
    'RepositoryFactory',
    'ClientRepository',
    'TaskTemplateRepository',
    'TaskRepository',
    'TenantUserRepository',
]
