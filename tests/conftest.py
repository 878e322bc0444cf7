"""
Pytest configuration and shared fixtures

- Template/client/task factories
- Chainable Supabase client mock (no network access)
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from app.models.client import Client
from app.models.task import Task
from app.models.task_template import RecurrenceCadence, TaskTemplate

TENANT_ID = "tenant-1"


@pytest.fixture
def make_template():
    """Factory for TaskTemplate instances"""
    def _make(template_id: str = "tpl-1", **overrides) -> TaskTemplate:
        fields = {
            "id": template_id,
            "tenant_id": TENANT_ID,
            "name": f"Obligation {template_id}",
            "description": "Monthly filing",
            "recurrence": RecurrenceCadence.MONTHLY,
            "due_day": 20,
            "adjust_to_business_day": False,
            "applicable_regimes": [],
            "active": True,
        }
        fields.update(overrides)
        return TaskTemplate(**fields)
    return _make


@pytest.fixture
def make_client():
    """Factory for Client instances"""
    def _make(client_id: str = "cli-1", **overrides) -> Client:
        fields = {
            "id": client_id,
            "tenant_id": TENANT_ID,
            "legal_name": f"Client {client_id} Ltda",
            "tax_regime": None,
            "active": True,
        }
        fields.update(overrides)
        return Client(**fields)
    return _make


@pytest.fixture
def make_task():
    """Factory for Task instances"""
    def _make(task_id: str = "task-1", **overrides) -> Task:
        fields = {
            "id": task_id,
            "tenant_id": TENANT_ID,
            "client_id": "cli-1",
            "template_id": "tpl-1",
            "title": "DAS",
            "competence": "01/2025",
            "due_date": date(2025, 2, 20),
        }
        fields.update(overrides)
        return Task(**fields)
    return _make


@pytest.fixture
def mock_supabase():
    """
    Supabase client mock whose query builder methods all return the same
    query object, so any chain ends in `query.execute()`.

    Set rows with: mock_supabase.query.execute.return_value.data = [...]
    """
    client = MagicMock()
    query = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "order", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=[])
    client.table.return_value = query
    client.query = query
    return client
