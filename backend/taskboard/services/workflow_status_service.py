import logging
import re
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .. import models
from ..exceptions import ConflictError, NotFoundError
from ..schemas import WorkflowStatusCreate, WorkflowStatusUpdate, StatusOrderItem

logger = logging.getLogger(__name__)

# Length of the workflow_statuses.slug column
SLUG_MAX_LENGTH = 255

# Board columns every project starts with, left to right
DEFAULT_STATUSES = [
    {
        "name": "New Task",
        "slug": "new_task",
        "color": "#6B7280",
        "is_default": True,
        "is_completed": False,
        "description": "Newly created tasks",
    },
    {
        "name": "Requirements Ready",
        "slug": "requirements_ready",
        "color": "#8B5CF6",
        "is_default": False,
        "is_completed": False,
        "description": "Requirements are complete and ready to start",
    },
    {
        "name": "In Progress",
        "slug": "in_progress",
        "color": "#3B82F6",
        "is_default": False,
        "is_completed": False,
        "description": "Currently being worked on",
    },
    {
        "name": "Testing",
        "slug": "testing",
        "color": "#F59E0B",
        "is_default": False,
        "is_completed": False,
        "description": "Under testing and quality assurance",
    },
    {
        "name": "Ready for Release",
        "slug": "ready_for_release",
        "color": "#10B981",
        "is_default": False,
        "is_completed": False,
        "description": "Tested and ready to be released",
    },
    {
        "name": "Completed",
        "slug": "completed",
        "color": "#059669",
        "is_default": False,
        "is_completed": True,
        "description": "Task is complete",
    },
]

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase the name and collapse everything else into underscores."""
    slug = _NON_ALNUM.sub("_", name.strip().lower()).strip("_")
    return slug or "status"


class WorkflowStatusService:
    """Service for the per-project registry of board columns."""

    @staticmethod
    def ordered_statuses(db: Session, project: models.Project) -> List[models.WorkflowStatus]:
        """Statuses of a project in board order (ascending ``order``, ties by id)."""
        return (
            db.query(models.WorkflowStatus)
            .filter(models.WorkflowStatus.project_id == project.id)
            .order_by(models.WorkflowStatus.order, models.WorkflowStatus.id)
            .all()
        )

    @staticmethod
    def create_default_statuses(db: Session, project: models.Project) -> List[models.WorkflowStatus]:
        """
        Seed the six default columns for a project that has none yet.

        Projects that already have at least one status are left untouched, so
        calling this repeatedly never duplicates columns.

        Returns:
            The project's statuses in board order
        """
        has_statuses = db.query(models.WorkflowStatus.id).filter(
            models.WorkflowStatus.project_id == project.id
        ).first()

        if has_statuses:
            logger.info(f"Project {project.id} already has workflow statuses; skipping defaults")
            return WorkflowStatusService.ordered_statuses(db, project)

        for position, definition in enumerate(DEFAULT_STATUSES):
            db.add(models.WorkflowStatus(project_id=project.id, order=position, **definition))
        db.commit()

        logger.info(f"Created {len(DEFAULT_STATUSES)} default workflow statuses for project {project.id}")
        return WorkflowStatusService.ordered_statuses(db, project)

    @staticmethod
    def get_project_status(db: Session, project: models.Project, status_id: int) -> models.WorkflowStatus:
        """
        Resolve a status id in the context of a project.

        Raises:
            NotFoundError: If the status does not exist or belongs to another project
        """
        status = db.query(models.WorkflowStatus).filter(models.WorkflowStatus.id == status_id).first()
        if status is None or status.project_id != project.id:
            raise NotFoundError("Workflow status not found")
        return status

    @staticmethod
    def _unique_slug(db: Session, project_id: int, base: str, exclude_id: Optional[int] = None) -> str:
        query = db.query(models.WorkflowStatus.slug).filter(models.WorkflowStatus.project_id == project_id)
        if exclude_id is not None:
            query = query.filter(models.WorkflowStatus.id != exclude_id)
        taken = {slug for (slug,) in query.all()}

        base = base[:SLUG_MAX_LENGTH]
        if base not in taken:
            return base
        suffix = 2
        while True:
            tail = f"_{suffix}"
            candidate = base[:SLUG_MAX_LENGTH - len(tail)] + tail
            if candidate not in taken:
                return candidate
            suffix += 1

    @staticmethod
    def create_status(db: Session, project: models.Project, data: WorkflowStatusCreate) -> models.WorkflowStatus:
        """Add a column to the project; appended after the last one unless an order is given."""
        order = data.order
        if order is None:
            max_order = db.query(func.max(models.WorkflowStatus.order)).filter(
                models.WorkflowStatus.project_id == project.id
            ).scalar()
            order = 0 if max_order is None else max_order + 1

        # The first column of a project becomes its default
        is_first = db.query(models.WorkflowStatus.id).filter(
            models.WorkflowStatus.project_id == project.id
        ).first() is None

        status = models.WorkflowStatus(
            project_id=project.id,
            name=data.name,
            slug=WorkflowStatusService._unique_slug(db, project.id, slugify(data.name)),
            color=data.color,
            order=order,
            is_default=is_first,
            is_completed=data.is_completed,
            description=data.description,
        )
        db.add(status)
        db.commit()
        db.refresh(status)

        logger.info(f"Created workflow status {status.id} '{status.name}' for project {project.id}")
        return status

    @staticmethod
    def update_status(db: Session, status: models.WorkflowStatus, data: WorkflowStatusUpdate) -> models.WorkflowStatus:
        fields = data.model_dump(exclude_unset=True)

        for key, value in fields.items():
            if value is None and key != "description":
                continue
            setattr(status, key, value)

        if fields.get("name"):
            status.slug = WorkflowStatusService._unique_slug(
                db, status.project_id, slugify(fields["name"]), exclude_id=status.id
            )

        db.commit()
        db.refresh(status)
        return status

    @staticmethod
    def delete_status(db: Session, status: models.WorkflowStatus) -> None:
        """
        Delete a column that no task occupies.

        Raises:
            ConflictError: If tasks still reference the status, or it is the project default
        """
        task_count = db.query(func.count(models.Task.id)).filter(
            models.Task.workflow_status_id == status.id
        ).scalar()

        if task_count:
            logger.warning(f"Refused to delete workflow status {status.id}: {task_count} task(s) attached")
            raise ConflictError(
                f"Cannot delete status with {task_count} task(s); move or delete tasks first."
            )

        if status.is_default:
            logger.warning(f"Refused to delete default workflow status {status.id}")
            raise ConflictError("Cannot delete the default status")

        db.delete(status)
        db.commit()
        logger.info(f"Deleted workflow status {status.id} from project {status.project_id}")

    @staticmethod
    def reorder_statuses(
        db: Session,
        project: models.Project,
        items: List[StatusOrderItem]
    ) -> List[models.WorkflowStatus]:
        """
        Apply new column positions.

        Raises:
            NotFoundError: If any id is not a status of this project; nothing is changed then
        """
        ids = [item.id for item in items]
        statuses = {
            status.id: status
            for status in db.query(models.WorkflowStatus).filter(
                models.WorkflowStatus.id.in_(ids),
                models.WorkflowStatus.project_id == project.id
            ).all()
        }

        missing = [status_id for status_id in ids if status_id not in statuses]
        if missing:
            raise NotFoundError(f"Workflow status {missing[0]} not found")

        for item in items:
            statuses[item.id].order = item.order
        db.commit()

        return WorkflowStatusService.ordered_statuses(db, project)

    @staticmethod
    def set_default_status(db: Session, project: models.Project, status: models.WorkflowStatus) -> models.WorkflowStatus:
        """Make ``status`` the only default column of the project."""
        db.query(models.WorkflowStatus).filter(
            models.WorkflowStatus.project_id == project.id,
            models.WorkflowStatus.id != status.id
        ).update({models.WorkflowStatus.is_default: False}, synchronize_session="fetch")

        status.is_default = True
        db.commit()
        db.refresh(status)
        return status
