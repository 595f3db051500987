import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, Query

from .. import models
from ..exceptions import NotFoundError, PermissionDeniedError, ValidationError
from ..schemas import CalendarEventCreate, CalendarEventUpdate

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = {"title", "start_date", "end_date", "type"}


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _validate_range(start_date: datetime, end_date: datetime) -> None:
    if _as_utc(end_date) < _as_utc(start_date):
        raise ValidationError("End date must be on or after the start date", field="end_date")


class CalendarService:
    """Service for personal calendar events and the users they are shared with."""

    @staticmethod
    def visible_events_query(db: Session, user: models.User) -> Query:
        """Events the user created or that were shared with them."""
        return db.query(models.CalendarEvent).filter(or_(
            models.CalendarEvent.user_id == user.id,
            models.CalendarEvent.shared_users.any(models.User.id == user.id),
        ))

    @staticmethod
    def list_events(
        db: Session,
        user: models.User,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None
    ) -> List[models.CalendarEvent]:
        """Visible events by start date; ``start``/``end`` keep the events overlapping that window."""
        query = CalendarService.visible_events_query(db, user)
        if start is not None:
            query = query.filter(models.CalendarEvent.end_date >= start)
        if end is not None:
            query = query.filter(models.CalendarEvent.start_date <= end)
        return query.order_by(models.CalendarEvent.start_date, models.CalendarEvent.id).all()

    @staticmethod
    def get_event_for_user(db: Session, event_id: int, user: models.User) -> models.CalendarEvent:
        """
        Raises:
            NotFoundError: If the event does not exist or is not visible to the user
        """
        event = CalendarService.visible_events_query(db, user).filter(
            models.CalendarEvent.id == event_id
        ).first()
        if event is None:
            raise NotFoundError("Calendar event not found")
        return event

    @staticmethod
    def _shared_users(db: Session, owner: models.User, user_ids: Iterable[int]) -> List[models.User]:
        wanted = [user_id for user_id in dict.fromkeys(user_ids) if user_id != owner.id]
        if not wanted:
            return []
        users = db.query(models.User).filter(models.User.id.in_(wanted)).all()
        missing = sorted(set(wanted) - {user.id for user in users})
        if missing:
            raise ValidationError(f"Unknown user id(s): {', '.join(map(str, missing))}", field="shared_user_ids")
        return users

    @staticmethod
    def _ensure_owner(event: models.CalendarEvent, user: models.User) -> None:
        if event.user_id != user.id:
            raise PermissionDeniedError("Only the creator can change this event")

    @staticmethod
    def create_event(db: Session, user: models.User, data: CalendarEventCreate) -> models.CalendarEvent:
        _validate_range(data.start_date, data.end_date)
        shared = CalendarService._shared_users(db, user, data.shared_user_ids)

        event = models.CalendarEvent(
            user_id=user.id,
            **data.model_dump(exclude={"shared_user_ids", "meeting_link"}),
            meeting_link=str(data.meeting_link) if data.meeting_link else None,
        )
        event.shared_users = shared
        db.add(event)
        db.commit()
        db.refresh(event)

        logger.info(f"Calendar event {event.id} created by user {user.id}, shared with {len(shared)} user(s)")
        return event

    @staticmethod
    def update_event(
        db: Session,
        event: models.CalendarEvent,
        user: models.User,
        data: CalendarEventUpdate
    ) -> models.CalendarEvent:
        """
        Raises:
            PermissionDeniedError: If the user did not create the event
            ValidationError: If the resulting end date is before the start date
        """
        CalendarService._ensure_owner(event, user)

        fields = data.model_dump(exclude_unset=True)
        shared_user_ids = fields.pop("shared_user_ids", None)
        if "meeting_link" in fields and fields["meeting_link"] is not None:
            fields["meeting_link"] = str(fields["meeting_link"])

        _validate_range(
            fields.get("start_date") or event.start_date,
            fields.get("end_date") or event.end_date,
        )

        for key, value in fields.items():
            if value is None and key in NON_NULLABLE_FIELDS:
                continue
            setattr(event, key, value)

        if shared_user_ids is not None:
            event.shared_users = CalendarService._shared_users(db, user, shared_user_ids)

        db.commit()
        db.refresh(event)
        return event

    @staticmethod
    def delete_event(db: Session, event: models.CalendarEvent, user: models.User) -> None:
        CalendarService._ensure_owner(event, user)
        event_id = event.id
        db.delete(event)
        db.commit()
        logger.info(f"Calendar event {event_id} deleted by user {user.id}")
