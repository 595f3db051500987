from pydantic import BaseModel, Field, HttpUrl
from typing import List, Optional
from datetime import datetime
from ..enums import CalendarEventType
from .workflow_status import HEX_COLOR


class CalendarEventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    type: CalendarEventType = CalendarEventType.CUSTOM
    meeting_link: Optional[HttpUrl] = None
    color: Optional[str] = Field(None, pattern=HEX_COLOR)
    shared_user_ids: List[int] = Field(default_factory=list, description="Users who may view the event")


class CalendarEventUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    type: Optional[CalendarEventType] = None
    meeting_link: Optional[HttpUrl] = None
    color: Optional[str] = Field(None, pattern=HEX_COLOR)
    shared_user_ids: Optional[List[int]] = Field(None, description="Replaces the sharing list when given")


class CalendarEvent(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    type: CalendarEventType
    meeting_link: Optional[str] = None
    color: Optional[str] = None
    shared_user_ids: List[int] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
