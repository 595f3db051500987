import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .. import models
from ..enums import TaskPriority
from ..exceptions import NotFoundError, ValidationError
from ..schemas import TaskCreate, TaskUpdate
from .assignment_service import AssignmentService
from .project_service import ProjectService
from .workflow_status_service import WorkflowStatusService

logger = logging.getLogger(__name__)

# Columns that can never be cleared through a partial update
NON_NULLABLE_FIELDS = {"title", "status", "priority"}


def _validate_dates(start_date: Optional[date], due_date: Optional[date]) -> None:
    if start_date and due_date and start_date > due_date:
        raise ValidationError("Due date must be on or after the start date", field="due_date")


class TaskService:
    """Service for task CRUD and list queries."""

    @staticmethod
    def next_order(db: Session, project_id: int, workflow_status_id: Optional[int]) -> int:
        """Position after the last task of the (project, column) pair."""
        query = db.query(func.max(models.Task.order)).filter(models.Task.project_id == project_id)
        if workflow_status_id is None:
            query = query.filter(models.Task.workflow_status_id.is_(None))
        else:
            query = query.filter(models.Task.workflow_status_id == workflow_status_id)

        current = query.scalar()
        return 0 if current is None else current + 1

    @staticmethod
    def create_task(db: Session, project: models.Project, data: TaskCreate, created_by: models.User) -> models.Task:
        """
        Create a task and fan out its assignments.

        The task is committed before its assignments; when no assignees are
        given, every developer member of the project is assigned.

        Args:
            db: Database session
            project: Owning project
            data: Task fields
            created_by: Current user, recorded as creator and assigner

        Returns:
            The persisted task

        Raises:
            NotFoundError: If ``workflow_status_id`` is not a status of the project
            ValidationError: On inconsistent dates or unknown assignees
        """
        _validate_dates(data.start_date, data.due_date)

        if data.workflow_status_id is not None:
            WorkflowStatusService.get_project_status(db, project, data.workflow_status_id)

        assignee_ids = AssignmentService.validate_user_ids(db, data.assigned_users)
        if not assignee_ids:
            assignee_ids = AssignmentService.default_assignees(db, project)

        order = data.order
        if order is None:
            order = TaskService.next_order(db, project.id, data.workflow_status_id)

        task = models.Task(
            project_id=project.id,
            title=data.title,
            description=data.description,
            priority=data.priority,
            start_date=data.start_date,
            due_date=data.due_date,
            estimated_hours=data.estimated_hours,
            labels=list(data.labels),
            workflow_status_id=data.workflow_status_id,
            order=order,
            created_by=created_by.id,
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        logger.info(f"Task {task.id} created in project {project.id} (status {task.workflow_status_id}, order {order})")

        AssignmentService.assign_users(db, task, assignee_ids, assigned_by=created_by.id)

        db.refresh(task)
        return task

    @staticmethod
    def list_tasks(
        db: Session,
        project: models.Project,
        workflow_status_id: Optional[int] = None,
        priority: Optional[TaskPriority] = None,
        assigned_to: Optional[int] = None,
        search: Optional[str] = None
    ) -> List[models.Task]:
        query = db.query(models.Task).filter(models.Task.project_id == project.id)

        if workflow_status_id is not None:
            query = query.filter(models.Task.workflow_status_id == workflow_status_id)

        if priority:
            query = query.filter(models.Task.priority == priority)

        if assigned_to is not None:
            query = query.filter(models.Task.assignments.any(models.TaskAssignment.user_id == assigned_to))

        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(
                models.Task.title.ilike(pattern),
                models.Task.description.ilike(pattern)
            ))

        return query.order_by(models.Task.order, models.Task.id).all()

    @staticmethod
    def user_tasks(db: Session, user_id: int, viewer: models.User) -> List[models.Task]:
        """Tasks assigned to ``user_id`` across projects ``viewer`` may see, newest first."""
        visible_project_ids = ProjectService.visible_projects_query(db, viewer).with_entities(models.Project.id)
        return (
            db.query(models.Task)
            .filter(
                models.Task.assignments.any(models.TaskAssignment.user_id == user_id),
                models.Task.project_id.in_(visible_project_ids),
            )
            .order_by(models.Task.created_at.desc(), models.Task.id.desc())
            .all()
        )

    @staticmethod
    def get_project_task(db: Session, project: models.Project, task_id: int) -> models.Task:
        """
        Raises:
            NotFoundError: If the task does not exist or belongs to another project
        """
        task = db.query(models.Task).filter(models.Task.id == task_id).first()
        if task is None or task.project_id != project.id:
            raise NotFoundError("Task not found")
        return task

    @staticmethod
    def get_task_for_user(db: Session, task_id: int, user: models.User) -> models.Task:
        """Resolve a task by id, provided its project is visible to the user."""
        task = db.query(models.Task).filter(models.Task.id == task_id).first()
        if task is None:
            raise NotFoundError("Task not found")
        ProjectService.get_project_for_user(db, task.project_id, user)
        return task

    @staticmethod
    def update_task(
        db: Session,
        project: models.Project,
        task: models.Task,
        data: TaskUpdate,
        updated_by: models.User
    ) -> models.Task:
        fields = data.model_dump(exclude_unset=True)
        assignee_ids = fields.pop("assigned_users", None)

        _validate_dates(
            fields.get("start_date", task.start_date),
            fields.get("due_date", task.due_date),
        )

        if assignee_ids is not None:
            assignee_ids = AssignmentService.validate_user_ids(db, assignee_ids)

        if "workflow_status_id" in fields:
            new_status_id = fields.pop("workflow_status_id")
            if new_status_id is not None:
                WorkflowStatusService.get_project_status(db, project, new_status_id)
            if new_status_id != task.workflow_status_id:
                task.order = TaskService.next_order(db, project.id, new_status_id)
                task.workflow_status_id = new_status_id

        for key, value in fields.items():
            if value is None and key in NON_NULLABLE_FIELDS:
                continue
            if key == "labels":
                value = list(value or [])
            setattr(task, key, value)

        db.commit()
        db.refresh(task)
        logger.info(f"Task {task.id} updated by user {updated_by.id}")

        if assignee_ids is not None:
            AssignmentService.sync_assignees(db, task, assignee_ids, assigned_by=updated_by.id)
            db.refresh(task)

        return task

    @staticmethod
    def delete_task(db: Session, task: models.Task) -> None:
        """Delete a task with its assignments and comments."""
        task_id = task.id
        db.delete(task)
        db.commit()
        logger.info(f"Task {task_id} deleted")
