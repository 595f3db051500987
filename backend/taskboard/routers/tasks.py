from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user, require_team_member
from ..enums import TaskPriority
from ..services.assignment_service import AssignmentService
from ..services.project_service import ProjectService
from ..services.task_service import TaskService

router = APIRouter(
    prefix="/projects/{project_id}/tasks",
    tags=["Tasks"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.TaskResponse])
def list_tasks(
    project_id: int,
    workflow_status_id: Optional[int] = Query(None, description="Only tasks in this column"),
    priority: Optional[TaskPriority] = Query(None),
    assigned_to: Optional[int] = Query(None, description="Only tasks assigned to this user"),
    search: Optional[str] = Query(None, description="Case-insensitive match on title or description"),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return TaskService.list_tasks(
        db, project,
        workflow_status_id=workflow_status_id,
        priority=priority,
        assigned_to=assigned_to,
        search=search,
    )


@router.post("", response_model=schemas.TaskResponse, status_code=201)
def create_task(
    project_id: int,
    task: schemas.TaskCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    """
    Create a task. Without explicit assignees every developer of the project is assigned.
    """
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return TaskService.create_task(db, project, task, current_user)


@router.get("/{task_id}", response_model=schemas.TaskResponse)
def get_task(
    project_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return TaskService.get_project_task(db, project, task_id)


@router.put("/{task_id}", response_model=schemas.TaskResponse)
def update_task(
    project_id: int,
    task_id: int,
    update: schemas.TaskUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    task = TaskService.get_project_task(db, project, task_id)
    return TaskService.update_task(db, project, task, update, current_user)


@router.delete("/{task_id}", response_model=schemas.MessageResponse)
def delete_task(
    project_id: int,
    task_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    task = TaskService.get_project_task(db, project, task_id)
    TaskService.delete_task(db, task)
    return {"message": "Task deleted successfully"}


@router.post("/{task_id}/assignees", response_model=schemas.TaskResponse)
def add_assignees(
    project_id: int,
    task_id: int,
    user_ids: List[int] = Body(..., embed=True),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    """Add assignees; users already on the task are left as they are"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    task = TaskService.get_project_task(db, project, task_id)
    AssignmentService.assign_users(db, task, user_ids, assigned_by=current_user.id)
    db.refresh(task)
    return task


@router.delete("/{task_id}/assignees/{user_id}", response_model=schemas.TaskResponse)
def remove_assignee(
    project_id: int,
    task_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    task = TaskService.get_project_task(db, project, task_id)
    AssignmentService.unassign_user(db, task, user_id)
    db.refresh(task)
    return task
