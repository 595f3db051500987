import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..core.settings import get_settings
from ..enums import ReminderType
from ..exceptions import NotFoundError, ValidationError
from ..schemas import ReminderCreate

logger = logging.getLogger(__name__)

REMINDER_FILTERS = ("unread", "pending")


def _project_recipients(project: models.Project) -> List[int]:
    """Project manager first, then members, without duplicates."""
    ids = []
    if project.project_manager_id is not None:
        ids.append(project.project_manager_id)
    ids.extend(member.user_id for member in project.members)
    return list(dict.fromkeys(ids))


class ReminderService:
    """
    Service for per-user reminders, including the scheduled project deadline sweep.
    """

    @staticmethod
    def check_project_deadlines(
        db: Session,
        today: Optional[date] = None,
        days: Optional[Iterable[int]] = None
    ) -> int:
        """
        Create deadline reminders for projects whose deadline is a configured number of days away.

        Each recipient gets a reminder at midnight UTC on the day before the deadline. A reminder
        that already exists for the same user, project and message is not created again.

        Args:
            db: Database session
            today: Reference date, defaults to the current UTC date
            days: Lead times in days, defaults to ``deadline_reminder_days`` from settings

        Returns:
            Number of projects that produced reminders
        """
        today = today or datetime.now(timezone.utc).date()
        days = sorted(set(days if days is not None else get_settings().deadline_reminder_days))

        projects_notified = 0
        for lead in days:
            deadline = today + timedelta(days=lead)
            projects = (
                db.query(models.Project)
                .filter(models.Project.deadline == deadline)
                .order_by(models.Project.id)
                .all()
            )

            for project in projects:
                recipients = _project_recipients(project)
                if not recipients:
                    continue

                title = "Project Deadline Approaching"
                description = f"Project '{project.title}' deadline is in {lead} day(s) - {deadline:%b %d, %Y}"
                remind_at = datetime.combine(deadline - timedelta(days=1), time.min, tzinfo=timezone.utc)

                created = 0
                for user_id in recipients:
                    exists = db.query(models.Reminder).filter(
                        models.Reminder.user_id == user_id,
                        models.Reminder.type == ReminderType.DEADLINE,
                        models.Reminder.related_model == "Project",
                        models.Reminder.related_model_id == project.id,
                        models.Reminder.title == title,
                        models.Reminder.description == description
                    ).first()
                    if exists:
                        continue

                    db.add(models.Reminder(
                        user_id=user_id,
                        title=title,
                        description=description,
                        type=ReminderType.DEADLINE,
                        remind_at=remind_at,
                        related_model="Project",
                        related_model_id=project.id,
                    ))
                    created += 1

                projects_notified += 1
                logger.info(
                    f"Deadline check: project {project.id} due {deadline}, "
                    f"{created} new reminder(s) for {len(recipients)} recipient(s)"
                )

        db.commit()
        return projects_notified

    @staticmethod
    def list_reminders(
        db: Session,
        user: models.User,
        reminder_type: Optional[ReminderType] = None,
        status: Optional[str] = None
    ) -> List[models.Reminder]:
        """
        Reminders of ``user`` ordered by remind_at.

        ``status`` narrows to ``unread`` reminders or ``pending`` ones (not yet sent).
        """
        query = db.query(models.Reminder).filter(models.Reminder.user_id == user.id)

        if reminder_type is not None:
            query = query.filter(models.Reminder.type == reminder_type)

        if status == "unread":
            query = query.filter(models.Reminder.is_read.is_(False))
        elif status == "pending":
            query = query.filter(models.Reminder.is_sent.is_(False))
        elif status is not None:
            raise ValidationError(f"Unknown reminder status '{status}'", field="status")

        return query.order_by(models.Reminder.remind_at, models.Reminder.id).all()

    @staticmethod
    def create_reminder(db: Session, user: models.User, data: ReminderCreate) -> models.Reminder:
        reminder = models.Reminder(user_id=user.id, **data.model_dump())
        db.add(reminder)
        db.commit()
        db.refresh(reminder)
        return reminder

    @staticmethod
    def get_user_reminder(db: Session, user: models.User, reminder_id: int) -> models.Reminder:
        """
        Raises:
            NotFoundError: If the reminder does not exist or belongs to someone else
        """
        reminder = db.query(models.Reminder).filter(
            models.Reminder.id == reminder_id,
            models.Reminder.user_id == user.id
        ).first()
        if reminder is None:
            raise NotFoundError("Reminder not found")
        return reminder

    @staticmethod
    def mark_read(db: Session, reminder: models.Reminder) -> models.Reminder:
        reminder.is_read = True
        db.commit()
        db.refresh(reminder)
        return reminder

    @staticmethod
    def delete_reminder(db: Session, reminder: models.Reminder) -> None:
        db.delete(reminder)
        db.commit()

    @staticmethod
    def pending_count(db: Session, user: models.User) -> int:
        """Unread reminders whose time has come."""
        return db.query(models.Reminder).filter(
            models.Reminder.user_id == user.id,
            models.Reminder.is_read.is_(False),
            models.Reminder.remind_at <= datetime.now(timezone.utc)
        ).count()
