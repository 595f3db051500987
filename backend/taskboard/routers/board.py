from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user, require_team_member
from ..services.board_service import BoardService
from ..services.project_service import ProjectService
from ..services.task_service import TaskService

router = APIRouter(
    prefix="/projects/{project_id}",
    tags=["Board"],
    responses={404: {"description": "Not found"}},
)


@router.get("/board", response_model=schemas.BoardResponse)
def get_board(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """
    Kanban view of the project.

    Columns follow the workflow status order; cards carry a dense ``position``
    within their column. Tasks without a column are listed under ``unassigned``.
    """
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return BoardService.board(db, project)


@router.patch("/tasks/{task_id}/status", response_model=schemas.TaskResponse)
def move_task(
    project_id: int,
    task_id: int,
    request: schemas.TaskMoveRequest,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    """Move a card to another column, or to another place in the same one"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    task = TaskService.get_project_task(db, project, task_id)
    return BoardService.move_task(db, project, task, request.workflow_status_id, request.order)


@router.post("/tasks/reorder", response_model=List[schemas.TaskResponse])
def reorder_tasks(
    project_id: int,
    request: schemas.TaskReorderRequest,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_team_member)
):
    """Apply positions for several cards at once, e.g. after a drag and drop"""
    project = ProjectService.get_project_for_user(db, project_id, current_user)
    return BoardService.reorder_tasks(db, project, request.tasks)
