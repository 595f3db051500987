from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, get_current_user, require_admin
from ..enums import UserRole
from ..exceptions import NotFoundError
from ..services.auth_service import AuthService
from ..services.project_service import ProjectService
from ..services.task_service import TaskService

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get("", response_model=List[schemas.UserSummary])
def list_users(
    role: Optional[UserRole] = Query(None, description="Only users with this role"),
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """List users, e.g. to pick assignees or project members"""
    query = db.query(models.User)
    if role is not None:
        query = query.filter(models.User.role == role)
    return query.order_by(models.User.name, models.User.id).all()


@router.post("", response_model=schemas.UserResponse, status_code=201)
def create_user(
    request: schemas.UserCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_admin)
):
    """Create an account with any role (admin only)"""
    return AuthService.create_account(db, request)


def _get_user(db: Session, user_id: int) -> models.User:
    user = db.query(models.User).filter(models.User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.get("/{user_id}", response_model=schemas.UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return _get_user(db, user_id)


@router.get("/{user_id}/projects", response_model=List[schemas.Project])
def list_user_projects(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Projects the user manages, owns or belongs to, among those visible to the caller"""
    user = _get_user(db, user_id)
    return ProjectService.user_projects(db, user.id, current_user)


@router.get("/{user_id}/tasks", response_model=List[schemas.TaskResponse])
def list_user_tasks(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Tasks assigned to the user, newest first, among projects visible to the caller"""
    user = _get_user(db, user_id)
    return TaskService.user_tasks(db, user.id, current_user)
