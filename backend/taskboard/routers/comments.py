from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user
from ..services.comment_service import CommentService
from ..services.task_service import TaskService

router = APIRouter(
    prefix="/tasks/{task_id}/comments",
    tags=["Comments"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.CommentThread])
def list_comments(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Top-level comments with their replies, oldest first"""
    task = TaskService.get_task_for_user(db, task_id, current_user)
    return CommentService.list_comments(db, task)


@router.post("", response_model=schemas.Comment, status_code=201)
def post_comment(
    task_id: int,
    comment: schemas.CommentCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    task = TaskService.get_task_for_user(db, task_id, current_user)
    return CommentService.post_comment(db, task, current_user, comment)


@router.put("/{comment_id}", response_model=schemas.Comment)
def update_comment(
    task_id: int,
    comment_id: int,
    update: schemas.CommentUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    task = TaskService.get_task_for_user(db, task_id, current_user)
    comment = CommentService.get_task_comment(db, task, comment_id)
    return CommentService.update_comment(db, comment, current_user, update)


@router.delete("/{comment_id}", response_model=schemas.MessageResponse)
def delete_comment(
    task_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    task = TaskService.get_task_for_user(db, task_id, current_user)
    comment = CommentService.get_task_comment(db, task, comment_id)
    CommentService.delete_comment(db, comment, current_user)
    return {"message": "Comment deleted successfully"}
