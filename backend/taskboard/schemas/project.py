from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import date, datetime
from ..enums import ProjectStatus


class ProjectBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    client_id: Optional[int] = None
    project_manager_id: Optional[int] = None
    deadline: Optional[date] = None
    status: ProjectStatus = ProjectStatus.PLANNING


class ProjectCreate(ProjectBase):
    developer_ids: List[int] = Field(default_factory=list, description="Users added as developer members")


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    client_id: Optional[int] = None
    project_manager_id: Optional[int] = None
    deadline: Optional[date] = None
    status: Optional[ProjectStatus] = None
    developer_ids: Optional[List[int]] = Field(None, description="Replaces the developer membership when given")


class Project(ProjectBase):
    id: int
    owner_id: Optional[int] = None
    developer_ids: List[int] = []
    created_at: datetime

    class Config:
        from_attributes = True


class ProjectStatistics(BaseModel):
    total: int
    by_status: Dict[str, int]
