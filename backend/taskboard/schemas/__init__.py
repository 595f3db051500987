# Auth schemas
from .auth import (
    RegisterRequest,
    LoginRequest,
    Token,
    UserResponse,
    AuthResponse,
)

# User schemas
from .user import UserSummary, UserCreate

# Shared schemas
from .common import MessageResponse, CountResponse

# Project schemas
from .project import (
    ProjectBase,
    ProjectCreate,
    ProjectUpdate,
    Project,
    ProjectStatistics,
)

# Workflow status schemas
from .workflow_status import (
    WorkflowStatusCreate,
    WorkflowStatusUpdate,
    WorkflowStatus,
    StatusOrderItem,
    StatusReorderRequest,
)

# Task schemas
from .task import (
    TaskCreate,
    TaskUpdate,
    TaskResponse,
    TaskMoveRequest,
    TaskOrderItem,
    TaskReorderRequest,
    BoardCard,
    BoardColumn,
    BoardResponse,
)

# Comment schemas
from .comment import CommentCreate, CommentUpdate, Comment, CommentThread

# Reminder schemas
from .reminder import ReminderCreate, Reminder

# People schemas
from .employee import (
    EmployeeCreate,
    EmployeeUpdate,
    PerformanceUpdate,
    PromotionRequest,
    Employee,
    EmployeeCreated,
    EmployeeStatistics,
)
from .client import ClientCreate, ClientUpdate, Client, ClientCreated

# Calendar schemas
from .calendar_event import CalendarEventCreate, CalendarEventUpdate, CalendarEvent

# Make all schemas available at package level
__all__ = [
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "Token",
    "UserResponse",
    "AuthResponse",
    # User
    "UserSummary",
    "UserCreate",
    # Shared
    "MessageResponse",
    "CountResponse",
    # Project
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "Project",
    "ProjectStatistics",
    # Workflow status
    "WorkflowStatusCreate",
    "WorkflowStatusUpdate",
    "WorkflowStatus",
    "StatusOrderItem",
    "StatusReorderRequest",
    # Task
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskMoveRequest",
    "TaskOrderItem",
    "TaskReorderRequest",
    "BoardCard",
    "BoardColumn",
    "BoardResponse",
    # Comment
    "CommentCreate",
    "CommentUpdate",
    "Comment",
    "CommentThread",
    # Reminder
    "ReminderCreate",
    "Reminder",
    # People
    "EmployeeCreate",
    "EmployeeUpdate",
    "PerformanceUpdate",
    "PromotionRequest",
    "Employee",
    "EmployeeCreated",
    "EmployeeStatistics",
    "ClientCreate",
    "ClientUpdate",
    "Client",
    "ClientCreated",
    # Calendar
    "CalendarEventCreate",
    "CalendarEventUpdate",
    "CalendarEvent",
]
