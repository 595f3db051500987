from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user, require_manager
from ..services.project_service import ProjectService
from ..services.workflow_status_service import WorkflowStatusService

router = APIRouter(
    prefix="/projects/{project_id}/workflow-statuses",
    tags=["Workflow Statuses"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.WorkflowStatus])
def list_statuses(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Board columns of the project, left to right"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return WorkflowStatusService.ordered_statuses(db, project)


@router.post("", response_model=schemas.WorkflowStatus, status_code=201)
def create_status(
    project_id: int,
    data: schemas.WorkflowStatusCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return WorkflowStatusService.create_status(db, project, data)


@router.post("/defaults", response_model=List[schemas.WorkflowStatus])
def create_default_statuses(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    """Seed the default columns; a project that already has columns is left as is"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return WorkflowStatusService.create_default_statuses(db, project)


@router.post("/reorder", response_model=List[schemas.WorkflowStatus])
def reorder_statuses(
    project_id: int,
    request: schemas.StatusReorderRequest,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return WorkflowStatusService.reorder_statuses(db, project, request.statuses)


@router.put("/{status_id}", response_model=schemas.WorkflowStatus)
def update_status(
    project_id: int,
    status_id: int,
    data: schemas.WorkflowStatusUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    status = WorkflowStatusService.get_project_status(db, project, status_id)
    return WorkflowStatusService.update_status(db, status, data)


@router.delete("/{status_id}", response_model=schemas.MessageResponse)
def delete_status(
    project_id: int,
    status_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    """Delete a column that no task uses and that is not the default"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    status = WorkflowStatusService.get_project_status(db, project, status_id)
    WorkflowStatusService.delete_status(db, status)
    return {"message": "Workflow status deleted successfully"}


@router.patch("/{status_id}/set-default", response_model=schemas.WorkflowStatus)
def set_default_status(
    project_id: int,
    status_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    status = WorkflowStatusService.get_project_status(db, project, status_id)
    return WorkflowStatusService.set_default_status(db, project, status)
