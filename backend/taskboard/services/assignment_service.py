import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..enums import MemberRole
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class AssignmentService:
    """
    Service for the many-to-many link between tasks and their assignees.

    ``TaskAssignment`` rows are the source of truth; ``Task.assigned_to`` is only
    derived from them.
    """

    @staticmethod
    def validate_user_ids(db: Session, user_ids: List[int], field: str = "assigned_users") -> List[int]:
        """
        De-duplicate ``user_ids`` (keeping first-seen order) and check they exist.

        Raises:
            ValidationError: If any id does not belong to a user
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return []

        found = {
            user_id for (user_id,) in db.query(models.User.id).filter(models.User.id.in_(unique_ids)).all()
        }
        missing = [user_id for user_id in unique_ids if user_id not in found]
        if missing:
            raise ValidationError(f"Unknown user id(s): {', '.join(map(str, missing))}", field=field)
        return unique_ids

    @staticmethod
    def default_assignees(db: Session, project: models.Project) -> List[int]:
        """Developer members of the project, used when a task is created without assignees."""
        rows = (
            db.query(models.ProjectMember.user_id)
            .filter(
                models.ProjectMember.project_id == project.id,
                models.ProjectMember.role == MemberRole.DEVELOPER
            )
            .order_by(models.ProjectMember.id)
            .all()
        )
        return [user_id for (user_id,) in rows]

    @staticmethod
    def assign_users(
        db: Session,
        task: models.Task,
        user_ids: List[int],
        assigned_by: Optional[int] = None
    ) -> List[models.TaskAssignment]:
        """
        Assign users to a task. Users that are already assigned are skipped.

        Returns:
            The newly created assignment rows
        """
        wanted = AssignmentService.validate_user_ids(db, user_ids)
        existing = {
            user_id for (user_id,) in db.query(models.TaskAssignment.user_id).filter(
                models.TaskAssignment.task_id == task.id
            ).all()
        }

        created = []
        for user_id in wanted:
            if user_id in existing:
                continue
            assignment = models.TaskAssignment(task_id=task.id, user_id=user_id, assigned_by=assigned_by)
            db.add(assignment)
            created.append(assignment)

        db.commit()
        if created:
            logger.info(f"Assigned user(s) {[a.user_id for a in created]} to task {task.id}")
        return created

    @staticmethod
    def unassign_user(db: Session, task: models.Task, user_id: int) -> int:
        """Remove a user from a task; returns the number of rows deleted."""
        assignments = db.query(models.TaskAssignment).filter(
            models.TaskAssignment.task_id == task.id,
            models.TaskAssignment.user_id == user_id
        ).all()

        for assignment in assignments:
            db.delete(assignment)
        db.commit()

        if assignments:
            logger.info(f"Unassigned user {user_id} from task {task.id}")
        return len(assignments)

    @staticmethod
    def sync_assignees(
        db: Session,
        task: models.Task,
        user_ids: List[int],
        assigned_by: Optional[int] = None
    ) -> None:
        """Make the assignee set equal to ``user_ids``: drop the others, add the new ones."""
        wanted = AssignmentService.validate_user_ids(db, user_ids)

        stale = db.query(models.TaskAssignment).filter(
            models.TaskAssignment.task_id == task.id,
            models.TaskAssignment.user_id.notin_(wanted)
        ).all()
        for assignment in stale:
            db.delete(assignment)
        db.flush()

        AssignmentService.assign_users(db, task, wanted, assigned_by=assigned_by)

    @staticmethod
    def assigned_users(db: Session, task: models.Task) -> List[models.User]:
        """Assignees in the order they were assigned."""
        return (
            db.query(models.User)
            .join(models.TaskAssignment, models.TaskAssignment.user_id == models.User.id)
            .filter(models.TaskAssignment.task_id == task.id)
            .order_by(models.TaskAssignment.id)
            .all()
        )
