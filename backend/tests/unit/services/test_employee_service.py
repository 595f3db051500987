from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from taskboard import models
from taskboard.auth import authenticate_user
from taskboard.enums import UserRole
from taskboard.exceptions import ConflictError, NotFoundError, ValidationError
from taskboard.schemas import EmployeeCreate, EmployeeUpdate, PerformanceUpdate, PromotionRequest
from taskboard.services.employee_service import EmployeeService, calculate_performance_score


@pytest.fixture
def employee(db_session: Session):
    created = EmployeeService.create_employee(
        db_session,
        EmployeeCreate(name="Erin Engineer", email="erin@example.com", designation="Developer", salary=Decimal("4200.00")),
    )
    return EmployeeService.get_employee(db_session, created.employee.id)


class TestPerformanceScore:
    def test_weights_completion_rate_and_satisfaction(self):
        # 80% completion -> 48, 50 points -> 20
        assert calculate_performance_score(8, 2, 50) == 68

    def test_no_completed_tasks_counts_only_satisfaction(self):
        assert calculate_performance_score(0, 5, 10) == 4

    def test_rounds_to_nearest_integer(self):
        # 75% completion -> 45, 1 point -> 0.4
        assert calculate_performance_score(3, 1, 1) == 45
        # 2/3 completion -> 40, 2 points -> 0.8
        assert calculate_performance_score(2, 1, 2) == 41

    def test_all_zero(self):
        assert calculate_performance_score(0, 0, 0) == 0


class TestCreateEmployee:
    def test_creates_account_and_profile(self, db_session: Session, employee):
        assert employee.user.role == UserRole.DEVELOPER
        assert employee.designation == "Developer"
        assert employee.joining_date == datetime.now(timezone.utc).date()
        assert employee.performance_score == 0

    def test_generated_password_logs_in(self, db_session: Session):
        created = EmployeeService.create_employee(
            db_session, EmployeeCreate(name="Pat PM", email="pat@example.com", role=UserRole.PROJECT_MANAGER)
        )

        assert len(created.password) == 12
        user = authenticate_user(db_session, "pat@example.com", created.password)
        assert user is not None and user.role == UserRole.PROJECT_MANAGER

    def test_explicit_joining_date_is_kept(self, db_session: Session):
        created = EmployeeService.create_employee(
            db_session, EmployeeCreate(name="Jo", email="jo@example.com", joining_date=date(2024, 3, 1))
        )
        assert created.employee.joining_date == date(2024, 3, 1)

    @pytest.mark.parametrize("role", [UserRole.CLIENT, UserRole.ADMIN])
    def test_non_employee_role_is_rejected(self, db_session: Session, role):
        with pytest.raises(ValidationError) as exc_info:
            EmployeeService.create_employee(db_session, EmployeeCreate(name="X", email="x@example.com", role=role))

        assert exc_info.value.field == "role"
        assert db_session.query(models.User).filter(models.User.email == "x@example.com").count() == 0

    def test_duplicate_email_conflicts(self, db_session: Session, manager):
        with pytest.raises(ConflictError):
            EmployeeService.create_employee(db_session, EmployeeCreate(name="Copy", email=manager.email))
        assert db_session.query(models.Employee).count() == 0


class TestUpdateEmployee:
    def test_updates_account_and_profile(self, db_session: Session, employee):
        updated = EmployeeService.update_employee(
            db_session, employee,
            EmployeeUpdate(name="Erin Lead", role=UserRole.PROJECT_MANAGER, phone="555-0100"),
        )

        assert updated.user.name == "Erin Lead"
        assert updated.user.role == UserRole.PROJECT_MANAGER
        assert updated.phone == "555-0100"
        assert updated.designation == "Developer"

    def test_email_taken_by_someone_else_conflicts(self, db_session: Session, employee, manager):
        with pytest.raises(ConflictError):
            EmployeeService.update_employee(db_session, employee, EmployeeUpdate(email=manager.email))

    def test_keeping_own_email_is_fine(self, db_session: Session, employee):
        updated = EmployeeService.update_employee(db_session, employee, EmployeeUpdate(email="erin@example.com"))
        assert updated.user.email == "erin@example.com"

    def test_client_role_is_rejected(self, db_session: Session, employee):
        with pytest.raises(ValidationError) as exc_info:
            EmployeeService.update_employee(db_session, employee, EmployeeUpdate(role=UserRole.CLIENT))
        assert exc_info.value.field == "role"


class TestPerformanceAndPromotion:
    def test_update_recalculates_score(self, db_session: Session, employee):
        updated = EmployeeService.update_performance(
            db_session, employee,
            PerformanceUpdate(tasks_completed=8, tasks_rejected=2, client_satisfaction_points=50),
        )
        assert updated.performance_score == 68

    def test_partial_update_keeps_other_counters(self, db_session: Session, employee):
        EmployeeService.update_performance(
            db_session, employee,
            PerformanceUpdate(tasks_completed=8, tasks_rejected=2, client_satisfaction_points=50),
        )
        updated = EmployeeService.update_performance(db_session, employee, PerformanceUpdate(tasks_rejected=0))

        assert updated.tasks_completed == 8
        # 100% completion -> 60, 50 points -> 20
        assert updated.performance_score == 80

    def test_promotion_keeps_salary_unless_given(self, db_session: Session, employee):
        promoted = EmployeeService.promote(db_session, employee, PromotionRequest(designation="Senior Developer"))

        assert promoted.designation == "Senior Developer"
        assert promoted.salary == Decimal("4200.00")
        assert promoted.last_promotion_date == datetime.now(timezone.utc).date()

        promoted = EmployeeService.promote(
            db_session, employee, PromotionRequest(designation="Lead", salary=Decimal("5100.00"))
        )
        assert promoted.salary == Decimal("5100.00")


class TestDeleteAndStatistics:
    def test_delete_removes_user(self, db_session: Session, employee):
        employee_id, user_id = employee.id, employee.user_id

        EmployeeService.delete_employee(db_session, employee)

        assert db_session.get(models.User, user_id) is None
        with pytest.raises(NotFoundError):
            EmployeeService.get_employee(db_session, employee_id)

    def test_statistics(self, db_session: Session, employee):
        EmployeeService.create_employee(
            db_session, EmployeeCreate(name="Pat PM", email="pat@example.com", role=UserRole.PROJECT_MANAGER)
        )
        EmployeeService.update_performance(
            db_session, employee,
            PerformanceUpdate(tasks_completed=8, tasks_rejected=2, client_satisfaction_points=50),
        )

        stats = EmployeeService.statistics(db_session)

        assert stats.total_employees == 2
        assert stats.developers == 1
        assert stats.project_managers == 1
        assert stats.avg_performance == 34.0

    def test_statistics_without_employees(self, db_session: Session):
        stats = EmployeeService.statistics(db_session)
        assert stats.total_employees == 0
        assert stats.avg_performance == 0.0

    def test_list_newest_first(self, db_session: Session, employee):
        second = EmployeeService.create_employee(db_session, EmployeeCreate(name="Sam", email="sam@example.com"))

        ids = [e.id for e in EmployeeService.list_employees(db_session)]
        assert ids == [second.employee.id, employee.id]
