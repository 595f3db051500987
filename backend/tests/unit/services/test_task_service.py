from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session

from taskboard import models
from taskboard.enums import TaskPriority, TaskState
from taskboard.exceptions import NotFoundError, ValidationError
from taskboard.schemas import TaskCreate, TaskUpdate
from taskboard.services.task_service import TaskService
from taskboard.services.workflow_status_service import WorkflowStatusService


def _create(db, project, user, **fields):
    fields.setdefault("title", "Write docs")
    return TaskService.create_task(db, project, TaskCreate(**fields), user)


class TestCreateTask:
    def test_defaults(self, db_session: Session, project, manager, statuses):
        task = _create(db_session, project, manager, workflow_status_id=statuses[0].id)

        assert task.id is not None
        assert task.status == TaskState.OPEN
        assert task.priority == TaskPriority.MEDIUM
        assert task.labels == []
        assert task.order == 0
        assert task.created_by == manager.id

    def test_order_appends_per_column(self, db_session: Session, project, manager, statuses):
        first = _create(db_session, project, manager, workflow_status_id=statuses[0].id)
        second = _create(db_session, project, manager, workflow_status_id=statuses[0].id)
        other_column = _create(db_session, project, manager, workflow_status_id=statuses[1].id)
        no_column = _create(db_session, project, manager)

        assert (first.order, second.order) == (0, 1)
        assert other_column.order == 0
        assert no_column.workflow_status_id is None
        assert no_column.order == 0

    def test_explicit_order_is_kept(self, db_session: Session, project, manager, statuses):
        task = _create(db_session, project, manager, workflow_status_id=statuses[0].id, order=42)
        assert task.order == 42

    def test_fields_round_trip(self, db_session: Session, project, manager, statuses):
        task = _create(
            db_session, project, manager,
            title="Ship v2",
            priority=TaskPriority.URGENT,
            start_date=date(2026, 3, 1),
            due_date=date(2026, 3, 10),
            estimated_hours=Decimal("12.50"),
            labels=["backend", "api"],
        )

        db_session.expire_all()
        stored = db_session.query(models.Task).filter(models.Task.id == task.id).one()
        assert stored.labels == ["backend", "api"]
        assert stored.estimated_hours == Decimal("12.50")
        assert stored.due_date == date(2026, 3, 10)

    def test_due_before_start_is_rejected(self, db_session: Session, project, manager):
        with pytest.raises(ValidationError) as exc_info:
            _create(db_session, project, manager, start_date=date(2026, 3, 10), due_date=date(2026, 3, 1))

        assert exc_info.value.field == "due_date"
        assert db_session.query(models.Task).count() == 0

    def test_status_of_other_project_is_rejected(self, db_session: Session, make_project, manager, project, statuses):
        other = make_project(manager, title="Other")
        foreign = WorkflowStatusService.ordered_statuses(db_session, other)[0]

        with pytest.raises(NotFoundError):
            _create(db_session, project, manager, workflow_status_id=foreign.id)

    def test_missing_title_is_rejected_by_schema(self):
        with pytest.raises(SchemaValidationError):
            TaskCreate(title="")


class TestListTasks:
    @pytest.fixture
    def tasks(self, db_session, project, manager, developers, statuses):
        return [
            _create(db_session, project, manager, title="Login page", workflow_status_id=statuses[0].id,
                    assigned_users=[developers[0].id]),
            _create(db_session, project, manager, title="Signup page", workflow_status_id=statuses[1].id,
                    priority=TaskPriority.HIGH, assigned_users=[developers[1].id]),
            _create(db_session, project, manager, title="Billing", description="Stripe LOGIN flow",
                    workflow_status_id=statuses[0].id, assigned_users=[developers[1].id]),
        ]

    def test_filters_by_status(self, db_session, project, statuses, tasks):
        result = TaskService.list_tasks(db_session, project, workflow_status_id=statuses[0].id)
        assert [t.title for t in result] == ["Login page", "Billing"]

    def test_filters_by_priority(self, db_session, project, tasks):
        result = TaskService.list_tasks(db_session, project, priority=TaskPriority.HIGH)
        assert [t.title for t in result] == ["Signup page"]

    def test_filters_by_assignee(self, db_session, project, developers, tasks):
        result = TaskService.list_tasks(db_session, project, assigned_to=developers[1].id)
        assert {t.title for t in result} == {"Signup page", "Billing"}

    def test_search_is_case_insensitive(self, db_session, project, tasks):
        result = TaskService.list_tasks(db_session, project, search="login")
        assert {t.title for t in result} == {"Login page", "Billing"}

    def test_get_task_of_other_project(self, db_session, make_project, manager, tasks):
        other = make_project(manager, title="Other")
        with pytest.raises(NotFoundError):
            TaskService.get_project_task(db_session, other, tasks[0].id)


class TestUpdateTask:
    def test_partial_update(self, db_session: Session, project, manager, statuses):
        task = _create(db_session, project, manager, workflow_status_id=statuses[0].id, labels=["a"])

        updated = TaskService.update_task(
            db_session, project, task,
            TaskUpdate(title="Renamed", status=TaskState.DONE, actual_hours=Decimal("3")),
            manager,
        )

        assert updated.title == "Renamed"
        assert updated.status == TaskState.DONE
        assert updated.labels == ["a"]
        assert updated.workflow_status_id == statuses[0].id

    def test_clearing_labels_reads_back_empty(self, db_session: Session, project, manager):
        task = _create(db_session, project, manager, labels=["x"])

        updated = TaskService.update_task(db_session, project, task, TaskUpdate(labels=None), manager)

        assert updated.labels == []

    def test_new_status_is_validated(self, db_session: Session, make_project, manager, project, statuses):
        other = make_project(manager, title="Other")
        foreign = WorkflowStatusService.ordered_statuses(db_session, other)[0]
        task = _create(db_session, project, manager, workflow_status_id=statuses[0].id)

        with pytest.raises(NotFoundError):
            TaskService.update_task(db_session, project, task, TaskUpdate(workflow_status_id=foreign.id), manager)

    def test_status_change_appends_to_new_column(self, db_session: Session, project, manager, statuses):
        _create(db_session, project, manager, workflow_status_id=statuses[1].id)
        task = _create(db_session, project, manager, workflow_status_id=statuses[0].id)

        updated = TaskService.update_task(
            db_session, project, task, TaskUpdate(workflow_status_id=statuses[1].id), manager
        )

        assert updated.workflow_status_id == statuses[1].id
        assert updated.order == 1

    def test_dates_checked_against_stored_values(self, db_session: Session, project, manager):
        task = _create(db_session, project, manager, start_date=date(2026, 5, 1))

        with pytest.raises(ValidationError):
            TaskService.update_task(db_session, project, task, TaskUpdate(due_date=date(2026, 4, 1)), manager)

    def test_delete_removes_assignments_and_comments(self, db_session: Session, project, manager, developers):
        task = _create(db_session, project, manager)
        db_session.add(models.TaskComment(task_id=task.id, user_id=manager.id, content="hi"))
        db_session.commit()

        TaskService.delete_task(db_session, task)

        assert db_session.query(models.Task).count() == 0
        assert db_session.query(models.TaskAssignment).count() == 0
        assert db_session.query(models.TaskComment).count() == 0


class TestUserTasks:
    def test_tasks_across_visible_projects(self, db_session: Session, make_project, manager, developers, project, outsider):
        other = make_project(manager, [developers[0]], title="Second Project")
        first = TaskService.create_task(db_session, project, TaskCreate(title="Here", assigned_users=[developers[0].id]), manager)
        second = TaskService.create_task(db_session, other, TaskCreate(title="There"), manager)
        TaskService.create_task(db_session, project, TaskCreate(title="Not mine", assigned_users=[developers[1].id]), manager)

        assert [t.id for t in TaskService.user_tasks(db_session, developers[0].id, manager)] == [second.id, first.id]
        assert TaskService.user_tasks(db_session, developers[0].id, outsider) == []
