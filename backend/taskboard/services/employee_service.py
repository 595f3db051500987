import logging
import math
from datetime import datetime, timezone
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from .. import models, schemas
from ..enums import UserRole
from ..exceptions import NotFoundError, ValidationError
from ..schemas import (
    EmployeeCreate,
    EmployeeUpdate,
    PerformanceUpdate,
    PromotionRequest,
    EmployeeCreated,
    EmployeeStatistics,
    UserCreate,
)
from .auth_service import AuthService

logger = logging.getLogger(__name__)

# Accounts that may carry an employee profile
EMPLOYEE_ROLES = {UserRole.DEVELOPER, UserRole.PROJECT_MANAGER}

ACCOUNT_FIELDS = ("name", "email", "role")

COMPLETION_WEIGHT = 0.6
SATISFACTION_WEIGHT = 0.4


def calculate_performance_score(tasks_completed: int, tasks_rejected: int, client_satisfaction_points: int) -> int:
    """
    Weighted score: 60% of the task completion rate (in percent) plus 40% of
    the client satisfaction points, rounded half up.
    """
    if tasks_completed > 0:
        completion_rate = tasks_completed / (tasks_completed + tasks_rejected) * 100
    else:
        completion_rate = 0
    score = completion_rate * COMPLETION_WEIGHT + client_satisfaction_points * SATISFACTION_WEIGHT
    return math.floor(score + 0.5)


def _check_role(role: UserRole) -> None:
    if role not in EMPLOYEE_ROLES:
        raise ValidationError(f"Employees must be developers or project managers, not '{role.value}'", field="role")


class EmployeeService:
    """Service for employee profiles and their performance metrics."""

    @staticmethod
    def list_employees(db: Session) -> List[models.Employee]:
        return (
            db.query(models.Employee)
            .order_by(models.Employee.created_at.desc(), models.Employee.id.desc())
            .all()
        )

    @staticmethod
    def get_employee(db: Session, employee_id: int) -> models.Employee:
        """
        Raises:
            NotFoundError: If the employee does not exist
        """
        employee = db.query(models.Employee).filter(models.Employee.id == employee_id).first()
        if employee is None:
            raise NotFoundError("Employee not found")
        return employee

    @staticmethod
    def create_employee(db: Session, data: EmployeeCreate) -> EmployeeCreated:
        """
        Create the user account and its employee profile.

        The account gets a generated password that is returned once in the response.

        Raises:
            ValidationError: If the role is not an employee role
            ConflictError: If the email is already registered
        """
        _check_role(data.role)

        password = AuthService.generate_password()
        user = AuthService.create_account(
            db, UserCreate(name=data.name, email=data.email, password=password, role=data.role)
        )

        profile = data.model_dump(exclude=set(ACCOUNT_FIELDS))
        if profile["joining_date"] is None:
            profile["joining_date"] = datetime.now(timezone.utc).date()

        employee = models.Employee(user_id=user.id, **profile)
        db.add(employee)
        db.commit()
        db.refresh(employee)

        logger.info(f"Employee {employee.id} created for user {user.id} ({user.role.value})")
        return EmployeeCreated(employee=schemas.Employee.model_validate(employee), password=password)

    @staticmethod
    def update_employee(db: Session, employee: models.Employee, data: EmployeeUpdate) -> models.Employee:
        fields = data.model_dump(exclude_unset=True)
        account = {key: fields.pop(key) for key in ACCOUNT_FIELDS if key in fields}

        if account.get("role") is not None:
            _check_role(account["role"])
        AuthService.update_account(db, employee.user, **account)

        for key, value in fields.items():
            setattr(employee, key, value)

        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def update_performance(db: Session, employee: models.Employee, data: PerformanceUpdate) -> models.Employee:
        """Overwrite the counters that were sent and recalculate the performance score."""
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(employee, key, value)

        employee.performance_score = calculate_performance_score(
            employee.tasks_completed or 0,
            employee.tasks_rejected or 0,
            employee.client_satisfaction_points or 0,
        )
        db.commit()
        db.refresh(employee)

        logger.info(f"Employee {employee.id} performance score is now {employee.performance_score}")
        return employee

    @staticmethod
    def promote(db: Session, employee: models.Employee, data: PromotionRequest) -> models.Employee:
        """Record a promotion; the salary is kept unless a new one is given."""
        employee.designation = data.designation
        if data.salary is not None:
            employee.salary = data.salary
        employee.last_promotion_date = datetime.now(timezone.utc).date()

        db.commit()
        db.refresh(employee)
        logger.info(f"Employee {employee.id} promoted to {employee.designation}")
        return employee

    @staticmethod
    def delete_employee(db: Session, employee: models.Employee) -> None:
        """Delete the employee together with the user account."""
        employee_id, user_id = employee.id, employee.user_id
        db.delete(employee.user)
        db.commit()
        logger.info(f"Employee {employee_id} and user {user_id} deleted")

    @staticmethod
    def statistics(db: Session) -> EmployeeStatistics:
        rows = (
            db.query(models.User.role, func.count(models.Employee.id))
            .select_from(models.Employee)
            .join(models.Employee.user)
            .group_by(models.User.role)
            .all()
        )
        by_role = {role: count for role, count in rows}
        average = db.query(func.avg(models.Employee.performance_score)).scalar()

        return EmployeeStatistics(
            total_employees=sum(by_role.values()),
            developers=by_role.get(UserRole.DEVELOPER, 0),
            project_managers=by_role.get(UserRole.PROJECT_MANAGER, 0),
            avg_performance=float(average or 0),
        )
