from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from ..enums import ReminderType


class ReminderCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: ReminderType = ReminderType.OTHER
    remind_at: datetime
    related_model: Optional[str] = None
    related_model_id: Optional[int] = None


class Reminder(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    type: ReminderType
    remind_at: datetime
    is_sent: bool
    is_read: bool
    related_model: Optional[str] = None
    related_model_id: Optional[int] = None

    class Config:
        from_attributes = True
