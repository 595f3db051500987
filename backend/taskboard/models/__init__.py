# Import and re-export all models so callers can use ``from taskboard import models``

# Import Base from db module
from ..db import Base

# Import all models from their individual files
from .user import User
from .project import Project, ProjectMember
from .workflow_status import WorkflowStatus
from .task import Task, TaskAssignment
from .task_comment import TaskComment
from .reminder import Reminder
from .employee import Employee
from .client import Client
from .calendar_event import CalendarEvent

# Ensure all models are available at package level
__all__ = [
    "Base",
    "User",
    "Project",
    "ProjectMember",
    "WorkflowStatus",
    "Task",
    "TaskAssignment",
    "TaskComment",
    "Reminder",
    "Employee",
    "Client",
    "CalendarEvent",
]
