"""Tests for the task, client, task generation and task template services"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models.client import ClientBase, ClientUpdate
from app.models.task import TaskCreateResult, TaskStatus, TaskUpdate
from app.models.task_template import RecurrenceCadence, TaskTemplateBase, TaskTemplateUpdate
from app.services.client_service import ClientService
from app.services.task import TaskGenerationService, TaskService, TaskTemplateService


class TestTaskGenerationService:

    @pytest.fixture
    def service(self):
        service = TaskGenerationService(MagicMock())
        repos = MagicMock()
        repos.task_templates.find_active_by_tenant = AsyncMock()
        repos.clients.find_active_by_tenant = AsyncMock()
        repos.tasks.exists_for_competence = AsyncMock(return_value=False)
        repos.tasks.create_from_template = AsyncMock(return_value=TaskCreateResult(id="task-1"))
        service.repositories = repos
        return service

    @pytest.mark.asyncio
    async def test_generates_from_tenant_data(self, service, make_template, make_client):
        repos = service.repositories
        repos.task_templates.find_active_by_tenant.return_value = [make_template()]
        repos.clients.find_active_by_tenant.return_value = [make_client("cli-1"), make_client("cli-2")]

        outcome = await service.generate_for_competence("tenant-1", "06/2025")

        assert outcome.success_count == 2
        repos.task_templates.find_active_by_tenant.assert_awaited_once_with("tenant-1")
        repos.clients.find_active_by_tenant.assert_awaited_once_with("tenant-1")
        assert repos.tasks.create_from_template.await_count == 2
        created = repos.tasks.create_from_template.await_args_list[0].args[0]
        assert created.competence == "06/2025"
        assert created.due_date == date(2025, 7, 20)

    @pytest.mark.asyncio
    async def test_no_templates(self, service, make_client):
        service.repositories.task_templates.find_active_by_tenant.return_value = []
        service.repositories.clients.find_active_by_tenant.return_value = [make_client()]

        outcome = await service.generate_for_competence("tenant-1", "06/2025")

        assert outcome.success_count == 0
        assert outcome.errors == ["No active templates found"]
        service.repositories.tasks.exists_for_competence.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("competence", ["13/2025", "00/2025", "ab/2025", "06-2025"])
    async def test_invalid_competence_rejected_before_any_read(self, service, competence):
        service.repositories.task_templates.find_active_by_tenant.return_value = []
        service.repositories.clients.find_active_by_tenant.return_value = []

        with pytest.raises(ValueError):
            await service.generate_for_competence("tenant-1", competence)

        service.repositories.task_templates.find_active_by_tenant.assert_not_called()
        service.repositories.clients.find_active_by_tenant.assert_not_called()

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, service):
        service.repositories.task_templates.find_active_by_tenant.side_effect = RuntimeError("timeout")

        with pytest.raises(RuntimeError):
            await service.generate_for_competence("tenant-1", "06/2025")


class TestTaskTemplateService:

    @pytest.fixture
    def service(self):
        service = TaskTemplateService(MagicMock())
        service.template_repo = MagicMock()
        service.template_repo.find_by_id = AsyncMock()
        service.template_repo.find_by_tenant = AsyncMock(return_value=[])
        service.template_repo.find_active_by_tenant = AsyncMock(return_value=[])
        service.template_repo.create = AsyncMock()
        service.template_repo.update = AsyncMock()
        service.template_repo.delete = AsyncMock(return_value=True)
        return service

    @pytest.mark.asyncio
    async def test_list_active_by_default(self, service):
        await service.list_templates("tenant-1")

        service.template_repo.find_active_by_tenant.assert_awaited_once_with("tenant-1")
        service.template_repo.find_by_tenant.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_including_inactive(self, service):
        await service.list_templates("tenant-1", include_inactive=True)

        service.template_repo.find_by_tenant.assert_awaited_once_with("tenant-1")

    @pytest.mark.asyncio
    async def test_get_template_of_other_tenant_is_hidden(self, service, make_template):
        service.template_repo.find_by_id.return_value = make_template(tenant_id="tenant-2")

        assert await service.get_template("tenant-1", "tpl-1") is None

    @pytest.mark.asyncio
    async def test_create_sets_tenant(self, service, make_template):
        service.template_repo.create.return_value = make_template()
        fields = TaskTemplateBase(name="DAS", due_day=20)

        await service.create_template("tenant-1", fields)

        created = service.template_repo.create.await_args.args[0]
        assert created.tenant_id == "tenant-1"
        assert created.name == "DAS"

    @pytest.mark.asyncio
    async def test_update_missing_template(self, service):
        service.template_repo.find_by_id.return_value = None

        result = await service.update_template("tenant-1", "tpl-x", TaskTemplateUpdate(name="New"))

        assert result is None
        service.template_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_of_other_tenant_is_refused(self, service, make_template):
        service.template_repo.find_by_id.return_value = make_template(tenant_id="tenant-2")

        assert await service.delete_template("tenant-1", "tpl-1") is False
        service.template_repo.delete.assert_not_called()

    def test_quarterly_schedule(self, service, make_template):
        template = make_template(
            recurrence=RecurrenceCadence.QUARTERLY, due_day=31, adjust_to_business_day=True
        )

        schedule = service.build_schedule(template, 2024, today=date(2024, 6, 1))

        assert [o.competence for o in schedule] == ["01/2024", "04/2024", "07/2024", "10/2024"]
        # Feb 29 2024 (Thu), May 31 2024 (Fri), Aug 31 2024 (Sat -> Mon Sep 2), Nov 30 2024 (Sat -> Mon Dec 2)
        assert [o.due_date for o in schedule] == [
            date(2024, 2, 29), date(2024, 5, 31), date(2024, 9, 2), date(2024, 12, 2),
        ]
        assert schedule[0].due_date_display == "29/02/2024"
        assert schedule[0].overdue is True
        assert schedule[2].days_until == 93
        assert schedule[2].overdue is False


class TestTaskService:

    @pytest.fixture
    def service(self):
        service = TaskService(MagicMock())
        service.task_repo = MagicMock()
        service.task_repo.find_by_tenant = AsyncMock(return_value=[])
        service.task_repo.find_by_id = AsyncMock()
        service.task_repo.update = AsyncMock()
        service.task_repo.update_status = AsyncMock()
        return service

    @pytest.mark.asyncio
    async def test_list_adds_urgency(self, service, make_task):
        service.task_repo.find_by_tenant.return_value = [
            make_task("late", due_date=date(2025, 2, 10)),
            make_task("done", due_date=date(2025, 2, 10), status=TaskStatus.COMPLETED),
            make_task("today", due_date=date(2025, 2, 14)),
            make_task("soon", due_date=date(2025, 2, 20)),
        ]

        items = await service.list_tasks("tenant-1", today=date(2025, 2, 14))

        assert [(i.id, i.days_until, i.overdue) for i in items] == [
            ("late", -4, True),
            ("done", -4, False),
            ("today", 0, False),
            ("soon", 6, False),
        ]

    @pytest.mark.asyncio
    async def test_list_passes_filters(self, service):
        await service.list_tasks(
            "tenant-1", status=TaskStatus.REVIEW, competence="02/2025", client_id="cli-3",
            today=date(2025, 3, 1),
        )

        service.task_repo.find_by_tenant.assert_awaited_once_with(
            "tenant-1", status=TaskStatus.REVIEW, competence="02/2025", client_id="cli-3"
        )

    @pytest.mark.asyncio
    async def test_list_rejects_out_of_range_competence(self, service):
        with pytest.raises(ValueError):
            await service.list_tasks("tenant-1", competence="13/2025")

        service.task_repo.find_by_tenant.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_task_of_other_tenant_is_hidden(self, service, make_task):
        service.task_repo.find_by_id.return_value = make_task(tenant_id="tenant-2")

        assert await service.get_task("tenant-1", "task-1") is None

    @pytest.mark.asyncio
    async def test_update_task(self, service, make_task):
        service.task_repo.find_by_id.return_value = make_task()
        service.task_repo.update.return_value = make_task(notes="Waiting for bank statements")
        updates = TaskUpdate(notes="Waiting for bank statements")

        task = await service.update_task("tenant-1", "task-1", updates)

        assert task.notes == "Waiting for bank statements"
        service.task_repo.update.assert_awaited_once_with("task-1", updates)

    @pytest.mark.asyncio
    async def test_change_status(self, service, make_task):
        service.task_repo.find_by_id.return_value = make_task()
        service.task_repo.update_status.return_value = make_task(status=TaskStatus.COMPLETED)

        task = await service.change_status("tenant-1", "task-1", TaskStatus.COMPLETED)

        assert task.status == TaskStatus.COMPLETED
        service.task_repo.update_status.assert_awaited_once_with("task-1", TaskStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_change_status_of_other_tenant_is_refused(self, service, make_task):
        service.task_repo.find_by_id.return_value = make_task(tenant_id="tenant-2")

        assert await service.change_status("tenant-1", "task-1", TaskStatus.COMPLETED) is None
        service.task_repo.update_status.assert_not_called()


class TestClientService:

    @pytest.fixture
    def service(self):
        service = ClientService(MagicMock())
        service.client_repo = MagicMock()
        service.client_repo.find_by_tenant = AsyncMock(return_value=[])
        service.client_repo.find_active_by_tenant = AsyncMock(return_value=[])
        service.client_repo.find_by_id = AsyncMock()
        service.client_repo.create = AsyncMock()
        service.client_repo.update = AsyncMock()
        return service

    @pytest.mark.asyncio
    async def test_list_active_by_default(self, service):
        await service.list_clients("tenant-1")

        service.client_repo.find_active_by_tenant.assert_awaited_once_with("tenant-1")
        service.client_repo.find_by_tenant.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_including_inactive(self, service):
        await service.list_clients("tenant-1", include_inactive=True)

        service.client_repo.find_by_tenant.assert_awaited_once_with("tenant-1")

    @pytest.mark.asyncio
    async def test_create_sets_tenant(self, service, make_client):
        service.client_repo.create.return_value = make_client()

        await service.create_client("tenant-1", ClientBase(legal_name="Padaria Pão Quente Ltda"))

        created = service.client_repo.create.await_args.args[0]
        assert created.tenant_id == "tenant-1"
        assert created.legal_name == "Padaria Pão Quente Ltda"

    @pytest.mark.asyncio
    async def test_update_of_other_tenant_is_refused(self, service, make_client):
        service.client_repo.find_by_id.return_value = make_client(tenant_id="tenant-2")

        result = await service.update_client("tenant-1", "cli-1", ClientUpdate(active=False))

        assert result is None
        service.client_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_deactivate(self, service, make_client):
        service.client_repo.find_by_id.return_value = make_client()
        service.client_repo.update.return_value = make_client(active=False)

        client = await service.update_client("tenant-1", "cli-1", ClientUpdate(active=False))

        assert client.active is False
