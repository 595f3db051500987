from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base


class WorkflowStatus(Base):
    """
    A board column of a project.
    Columns are laid out left to right by ascending ``order``; values need not
    be contiguous.
    """
    __tablename__ = "workflow_statuses"
    __table_args__ = (UniqueConstraint("project_id", "slug", name="uq_workflow_statuses_project_slug"),)
    
    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    color = Column(String(7), nullable=False, default="#6B7280")
    order = Column(Integer, nullable=False, default=0)
    is_default = Column(Boolean, nullable=False, default=False)
    is_completed = Column(Boolean, nullable=False, default=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    project = relationship("Project", back_populates="workflow_statuses")
    tasks = relationship("Task", back_populates="workflow_status", passive_deletes=True)
