import pytest
from sqlalchemy.orm import Session

from taskboard import models
from taskboard.exceptions import ConflictError, NotFoundError
from taskboard.schemas import WorkflowStatusCreate, WorkflowStatusUpdate, StatusOrderItem
from taskboard.services.workflow_status_service import WorkflowStatusService, DEFAULT_STATUSES, slugify


class TestSlugify:
    def test_collapses_non_alphanumerics(self):
        assert slugify("Code Review!") == "code_review"
        assert slugify("  QA / UAT  ") == "qa_uat"

    def test_blank_name_falls_back(self):
        assert slugify("!!!") == "status"


class TestDefaultStatuses:
    def test_seeds_six_columns_in_order(self, db_session: Session, statuses):
        assert [s.slug for s in statuses] == [d["slug"] for d in DEFAULT_STATUSES]
        assert [s.order for s in statuses] == [0, 1, 2, 3, 4, 5]
        assert [s.slug for s in statuses if s.is_default] == ["new_task"]
        assert [s.slug for s in statuses if s.is_completed] == ["completed"]

    def test_is_idempotent(self, db_session: Session, project, statuses):
        again = WorkflowStatusService.create_default_statuses(db_session, project)

        assert [s.id for s in again] == [s.id for s in statuses]
        count = db_session.query(models.WorkflowStatus).filter(
            models.WorkflowStatus.project_id == project.id
        ).count()
        assert count == 6

    def test_project_with_custom_column_is_left_alone(self, db_session: Session, make_project, manager):
        project = make_project(manager, seed_statuses=False)
        WorkflowStatusService.create_status(db_session, project, WorkflowStatusCreate(name="Inbox", color="#111111"))

        result = WorkflowStatusService.create_default_statuses(db_session, project)

        assert [s.name for s in result] == ["Inbox"]


class TestCreateStatus:
    def test_appends_after_last_column(self, db_session: Session, project, statuses):
        status = WorkflowStatusService.create_status(
            db_session, project, WorkflowStatusCreate(name="Code Review", color="#123ABC")
        )

        assert status.slug == "code_review"
        assert status.order == 6
        assert status.is_default is False

    def test_duplicate_name_gets_suffixed_slug(self, db_session: Session, project, statuses):
        status = WorkflowStatusService.create_status(
            db_session, project, WorkflowStatusCreate(name="In Progress", color="#123ABC")
        )
        again = WorkflowStatusService.create_status(
            db_session, project, WorkflowStatusCreate(name="In-Progress", color="#123ABC")
        )

        assert status.slug == "in_progress_2"
        assert again.slug == "in_progress_3"

    def test_max_length_duplicate_name_keeps_slug_within_column(self, db_session: Session, project, statuses):
        name = "x" * 255
        first = WorkflowStatusService.create_status(db_session, project, WorkflowStatusCreate(name=name, color="#123ABC"))
        second = WorkflowStatusService.create_status(db_session, project, WorkflowStatusCreate(name=name, color="#123ABC"))

        assert first.slug == name
        assert len(second.slug) == 255
        assert second.slug == "x" * 253 + "_2"

    def test_first_column_becomes_default(self, db_session: Session, make_project, manager):
        project = make_project(manager, seed_statuses=False)

        status = WorkflowStatusService.create_status(
            db_session, project, WorkflowStatusCreate(name="Backlog", color="#000000")
        )

        assert status.order == 0
        assert status.is_default is True

    def test_same_slug_allowed_in_other_project(self, db_session: Session, make_project, manager, statuses):
        other = make_project(manager, title="Other")
        assert WorkflowStatusService.ordered_statuses(db_session, other)[0].slug == statuses[0].slug


class TestUpdateStatus:
    def test_rename_rederives_slug(self, db_session: Session, statuses):
        status = WorkflowStatusService.update_status(
            db_session, statuses[1], WorkflowStatusUpdate(name="Ready For Dev", color="#FFFFFF")
        )

        assert status.slug == "ready_for_dev"
        assert status.color == "#FFFFFF"

    def test_partial_update_keeps_other_fields(self, db_session: Session, statuses):
        status = WorkflowStatusService.update_status(db_session, statuses[2], WorkflowStatusUpdate(is_completed=True))

        assert status.name == "In Progress"
        assert status.slug == "in_progress"
        assert status.is_completed is True


class TestDeleteStatus:
    def test_refuses_status_with_tasks(self, db_session: Session, project, statuses):
        column = statuses[2]
        db_session.add(models.Task(project_id=project.id, title="Busy", workflow_status_id=column.id))
        db_session.commit()

        with pytest.raises(ConflictError) as exc_info:
            WorkflowStatusService.delete_status(db_session, column)

        assert "1 task(s)" in str(exc_info.value)
        assert db_session.query(models.WorkflowStatus).filter(models.WorkflowStatus.id == column.id).count() == 1

    def test_refuses_default_status(self, db_session: Session, statuses):
        with pytest.raises(ConflictError):
            WorkflowStatusService.delete_status(db_session, statuses[0])

    def test_deletes_unused_status(self, db_session: Session, project, statuses):
        WorkflowStatusService.delete_status(db_session, statuses[3])

        remaining = WorkflowStatusService.ordered_statuses(db_session, project)
        assert [s.slug for s in remaining] == [
            "new_task", "requirements_ready", "in_progress", "ready_for_release", "completed"
        ]


class TestResolveAndReorder:
    def test_status_of_other_project_is_not_found(self, db_session: Session, make_project, manager, project, statuses):
        other = make_project(manager, title="Other")
        foreign = WorkflowStatusService.ordered_statuses(db_session, other)[0]

        with pytest.raises(NotFoundError):
            WorkflowStatusService.get_project_status(db_session, project, foreign.id)

    def test_missing_status_is_not_found(self, db_session: Session, project, statuses):
        with pytest.raises(NotFoundError):
            WorkflowStatusService.get_project_status(db_session, project, 999999)

    def test_reorder_reverses_columns(self, db_session: Session, project, statuses):
        items = [StatusOrderItem(id=s.id, order=5 - i) for i, s in enumerate(statuses)]

        result = WorkflowStatusService.reorder_statuses(db_session, project, items)

        assert [s.id for s in result] == [s.id for s in reversed(statuses)]

    def test_reorder_with_foreign_id_changes_nothing(self, db_session: Session, make_project, manager, project, statuses):
        other = make_project(manager, title="Other")
        foreign = WorkflowStatusService.ordered_statuses(db_session, other)[0]
        items = [StatusOrderItem(id=statuses[0].id, order=10), StatusOrderItem(id=foreign.id, order=0)]

        with pytest.raises(NotFoundError):
            WorkflowStatusService.reorder_statuses(db_session, project, items)

        db_session.refresh(statuses[0])
        assert statuses[0].order == 0

    def test_set_default_clears_siblings(self, db_session: Session, project, statuses):
        WorkflowStatusService.set_default_status(db_session, project, statuses[2])

        defaults = [s.slug for s in WorkflowStatusService.ordered_statuses(db_session, project) if s.is_default]
        assert defaults == ["in_progress"]
