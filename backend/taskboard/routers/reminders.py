from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user
from ..enums import ReminderType
from ..services.reminder_service import ReminderService

router = APIRouter(
    prefix="/reminders",
    tags=["Reminders"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Reminder])
def list_reminders(
    type: Optional[ReminderType] = Query(None),
    status: Optional[Literal["unread", "pending"]] = Query(None),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Reminders of the current user ordered by when they are due"""
    return ReminderService.list_reminders(db, current_user, reminder_type=type, status=status)


@router.post("", response_model=schemas.Reminder, status_code=201)
def create_reminder(
    reminder: schemas.ReminderCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return ReminderService.create_reminder(db, current_user, reminder)


@router.get("/pending-count", response_model=schemas.CountResponse)
def pending_count(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Number of unread reminders that are already due"""
    return {"count": ReminderService.pending_count(db, current_user)}


@router.patch("/{reminder_id}/mark-read", response_model=schemas.Reminder)
def mark_read(
    reminder_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    reminder = ReminderService.get_user_reminder(db, current_user, reminder_id)
    return ReminderService.mark_read(db, reminder)


@router.delete("/{reminder_id}", response_model=schemas.MessageResponse)
def delete_reminder(
    reminder_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    reminder = ReminderService.get_user_reminder(db, current_user, reminder_id)
    ReminderService.delete_reminder(db, reminder)
    return {"message": "Reminder deleted successfully"}
