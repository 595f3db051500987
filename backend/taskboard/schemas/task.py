from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from ..enums import TaskPriority, TaskState
from .user import UserSummary
from .workflow_status import WorkflowStatus


class TaskCreate(BaseModel):
    """Schema for creating a task on a project"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[Decimal] = Field(None, ge=0, max_digits=8, decimal_places=2)
    labels: List[str] = Field(default_factory=list)
    workflow_status_id: Optional[int] = Field(None, description="Board column; the task has no column when omitted")
    order: Optional[int] = Field(None, description="Position in the column; appended to the end when omitted")
    assigned_users: List[int] = Field(
        default_factory=list,
        description="Assignee user ids; every developer member of the project is assigned when empty",
    )


class TaskUpdate(BaseModel):
    """Partial task update; only fields present in the request are applied"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskState] = None
    workflow_status_id: Optional[int] = None
    priority: Optional[TaskPriority] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[Decimal] = Field(None, ge=0, max_digits=8, decimal_places=2)
    actual_hours: Optional[Decimal] = Field(None, ge=0, max_digits=8, decimal_places=2)
    labels: Optional[List[str]] = None
    assigned_users: Optional[List[int]] = Field(None, description="Replaces the assignee set when given")


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: int
    project_id: int
    title: str
    description: Optional[str] = None
    status: TaskState
    workflow_status_id: Optional[int] = None
    workflow_status: Optional[WorkflowStatus] = None
    priority: TaskPriority
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    labels: List[str] = []
    order: int
    assigned_to: Optional[int] = Field(None, description="Earliest assignee, kept for older clients")
    assigned_users: List[UserSummary] = []
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TaskMoveRequest(BaseModel):
    workflow_status_id: int
    order: Optional[int] = None


class TaskOrderItem(BaseModel):
    id: int
    order: int
    workflow_status_id: int


class TaskReorderRequest(BaseModel):
    tasks: List[TaskOrderItem] = Field(..., min_length=1)


class BoardCard(TaskResponse):
    position: int = Field(0, description="Dense 0-based rank within the column")


class BoardColumn(BaseModel):
    status: WorkflowStatus
    task_count: int
    tasks: List[BoardCard]


class BoardResponse(BaseModel):
    project_id: int
    columns: List[BoardColumn]
    unassigned: List[BoardCard] = Field(default_factory=list, description="Tasks without a board column")
