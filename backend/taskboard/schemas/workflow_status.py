from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class WorkflowStatusCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., pattern=HEX_COLOR, description="Hex color, e.g. #3B82F6")
    order: Optional[int] = Field(None, description="Column position; appended after the last column when omitted")
    description: Optional[str] = None
    is_completed: bool = False


class WorkflowStatusUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    color: Optional[str] = Field(None, pattern=HEX_COLOR)
    order: Optional[int] = None
    description: Optional[str] = None
    is_completed: Optional[bool] = None


class WorkflowStatus(BaseModel):
    id: int
    project_id: int
    name: str
    slug: str
    color: str
    order: int
    is_default: bool
    is_completed: bool
    description: Optional[str] = None

    class Config:
        from_attributes = True


class StatusOrderItem(BaseModel):
    id: int
    order: int


class StatusReorderRequest(BaseModel):
    statuses: List[StatusOrderItem] = Field(..., min_length=1)
