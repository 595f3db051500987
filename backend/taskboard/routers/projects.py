from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user, require_manager
from ..services.project_service import ProjectService

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Project])
def list_projects(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """List the projects visible to the current user, newest first"""
    return ProjectService.list_projects(db, current_user)


@router.post("", response_model=schemas.Project, status_code=201)
def create_project(
    project: schemas.ProjectCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    """Create a project seeded with the default board columns"""
    return ProjectService.create_project(db, project, current_user)


@router.get("/statistics", response_model=schemas.ProjectStatistics)
def project_statistics(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return ProjectService.project_statistics(db, current_user)


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return ProjectService.get_project_for_user(db, project_id, current_user)


@router.put("/{project_id}", response_model=schemas.Project)
def update_project(
    project_id: int,
    update: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return ProjectService.update_project(db, project, update)


@router.delete("/{project_id}", response_model=schemas.MessageResponse)
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Delete a project with its tasks, columns and memberships"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    ProjectService.delete_project(db, project, current_user)
    return {"message": "Project deleted successfully"}
