from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base
from ..enums import TaskPriority, TaskState
from ..types import JSONList
from ._clock import utcnow


class Task(Base):
    """
    A card on the project board.
    Its position is the pair (workflow_status_id, order); ``order`` is scoped to
    that column and is not unique, ties fall back to insertion (id) order.
    """
    __tablename__ = "tasks"
    
    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(Enum(TaskState), nullable=False, default=TaskState.OPEN)
    workflow_status_id = Column(Integer, ForeignKey("workflow_statuses.id", ondelete="SET NULL"), nullable=True, index=True)
    priority = Column(Enum(TaskPriority), nullable=False, default=TaskPriority.MEDIUM, index=True)
    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    estimated_hours = Column(Numeric(8, 2), nullable=True)
    actual_hours = Column(Numeric(8, 2), nullable=True)
    labels = Column(JSONList, nullable=True, default=list)
    order = Column(Integer, nullable=False, default=0)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    
    project = relationship("Project", back_populates="tasks")
    workflow_status = relationship("WorkflowStatus", back_populates="tasks")
    creator = relationship("User", foreign_keys=[created_by])
    assignments = relationship(
        "TaskAssignment",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="TaskAssignment.id",
    )
    comments = relationship("TaskComment", back_populates="task", cascade="all, delete-orphan")

    @property
    def assigned_users(self):
        return [assignment.user for assignment in self.assignments]

    @property
    def assigned_to(self):
        # Legacy single-assignee view, derived from the earliest assignment
        if not self.assignments:
            return None
        return self.assignments[0].user_id


class TaskAssignment(Base):
    __tablename__ = "task_assignments"
    __table_args__ = (UniqueConstraint("task_id", "user_id", name="uq_task_assignments_task_user"),)
    
    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    assigned_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    assigned_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    
    task = relationship("Task", back_populates="assignments")
    user = relationship("User", foreign_keys=[user_id])
    assigner = relationship("User", foreign_keys=[assigned_by])
