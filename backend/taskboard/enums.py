from enum import Enum

class UserRole(str, Enum):
    ADMIN = "admin"
    PROJECT_MANAGER = "project_manager"
    DEVELOPER = "developer"
    CLIENT = "client"

class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"

class MemberRole(str, Enum):
    DEVELOPER = "developer"
    MANAGER = "manager"
    CLIENT = "client"
    VIEWER = "viewer"

class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

class TaskState(str, Enum):
    """Legacy coarse task state, kept alongside the workflow status."""
    OPEN = "open"
    DONE = "done"

class ReminderType(str, Enum):
    TASK = "task"
    MEETING = "meeting"
    DEADLINE = "deadline"
    EVENT = "event"
    OTHER = "other"

class CalendarEventType(str, Enum):
    CUSTOM = "custom"
    GOOGLE_MEET = "google_meet"
    MEETING = "meeting"
    REMINDER = "reminder"
