from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user
from ..services.calendar_service import CalendarService

router = APIRouter(
    prefix="/calendar-events",
    tags=["Calendar"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.CalendarEvent])
def list_events(
    start: Optional[datetime] = Query(None, description="Only events ending at or after this time"),
    end: Optional[datetime] = Query(None, description="Only events starting at or before this time"),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Events the current user created or was invited to, by start date"""
    return CalendarService.list_events(db, current_user, start=start, end=end)


@router.post("", response_model=schemas.CalendarEvent, status_code=201)
def create_event(
    event: schemas.CalendarEventCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return CalendarService.create_event(db, current_user, event)


@router.get("/{event_id}", response_model=schemas.CalendarEvent)
def get_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return CalendarService.get_event_for_user(db, event_id, current_user)


@router.put("/{event_id}", response_model=schemas.CalendarEvent)
def update_event(
    event_id: int,
    event_update: schemas.CalendarEventUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    event = CalendarService.get_event_for_user(db, event_id, current_user)
    return CalendarService.update_event(db, event, current_user, event_update)


@router.delete("/{event_id}", response_model=schemas.MessageResponse)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    event = CalendarService.get_event_for_user(db, event_id, current_user)
    CalendarService.delete_event(db, event, current_user)
    return {"message": "Event deleted successfully"}
