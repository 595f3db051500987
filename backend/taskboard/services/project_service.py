import logging
from typing import Iterable, List

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, Query

from .. import models
from ..enums import UserRole, MemberRole, ProjectStatus
from ..exceptions import NotFoundError, PermissionDeniedError, ValidationError
from ..schemas import ProjectCreate, ProjectUpdate, ProjectStatistics
from .workflow_status_service import WorkflowStatusService

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for project lifecycle and role-based visibility."""

    @staticmethod
    def visible_projects_query(db: Session, user: models.User) -> Query:
        """
        Projects the user may see.

        Admins see everything; clients see the projects they are the client of;
        project managers see the projects they manage or own; everyone also sees
        the projects they are a member of.
        """
        query = db.query(models.Project)
        if user.role == UserRole.ADMIN:
            return query

        is_member = models.Project.members.any(models.ProjectMember.user_id == user.id)
        if user.role == UserRole.CLIENT:
            return query.filter(or_(models.Project.client_id == user.id, is_member))
        if user.role == UserRole.PROJECT_MANAGER:
            return query.filter(or_(
                models.Project.project_manager_id == user.id,
                models.Project.owner_id == user.id,
                is_member,
            ))
        return query.filter(is_member)

    @staticmethod
    def list_projects(db: Session, user: models.User) -> List[models.Project]:
        return (
            ProjectService.visible_projects_query(db, user)
            .order_by(models.Project.created_at.desc(), models.Project.id.desc())
            .all()
        )

    @staticmethod
    def user_projects(db: Session, user_id: int, viewer: models.User) -> List[models.Project]:
        """Projects ``user_id`` manages, owns or belongs to, limited to what ``viewer`` may see."""
        return (
            ProjectService.visible_projects_query(db, viewer)
            .filter(or_(
                models.Project.project_manager_id == user_id,
                models.Project.owner_id == user_id,
                models.Project.members.any(models.ProjectMember.user_id == user_id),
            ))
            .order_by(models.Project.created_at.desc(), models.Project.id.desc())
            .all()
        )

    @staticmethod
    def get_project_for_user(db: Session, project_id: int, user: models.User) -> models.Project:
        """
        Raises:
            NotFoundError: If the project does not exist or is not visible to the user
        """
        project = ProjectService.visible_projects_query(db, user).filter(
            models.Project.id == project_id
        ).first()
        if project is None:
            raise NotFoundError("Project not found")
        return project

    @staticmethod
    def _ensure_users_exist(db: Session, user_ids: Iterable[int], field: str) -> None:
        wanted = {user_id for user_id in user_ids if user_id is not None}
        if not wanted:
            return
        found = {user_id for (user_id,) in db.query(models.User.id).filter(models.User.id.in_(wanted)).all()}
        missing = sorted(wanted - found)
        if missing:
            raise ValidationError(f"Unknown user id(s): {', '.join(map(str, missing))}", field=field)

    @staticmethod
    def _set_developers(db: Session, project: models.Project, developer_ids: List[int]) -> None:
        wanted = list(dict.fromkeys(developer_ids))
        current = {member.user_id: member for member in project.members}

        for user_id, member in current.items():
            if member.role == MemberRole.DEVELOPER and user_id not in wanted:
                project.members.remove(member)

        for user_id in wanted:
            member = current.get(user_id)
            if member is None:
                project.members.append(models.ProjectMember(user_id=user_id, role=MemberRole.DEVELOPER))
            elif member.role != MemberRole.DEVELOPER:
                member.role = MemberRole.DEVELOPER

    @staticmethod
    def create_project(db: Session, data: ProjectCreate, owner: models.User) -> models.Project:
        """Create a project, add its developers and seed the default board columns."""
        ProjectService._ensure_users_exist(db, [data.client_id], "client_id")
        ProjectService._ensure_users_exist(db, [data.project_manager_id], "project_manager_id")
        ProjectService._ensure_users_exist(db, data.developer_ids, "developer_ids")

        project = models.Project(
            owner_id=owner.id,
            **data.model_dump(exclude={"developer_ids"})
        )
        db.add(project)
        db.flush()

        ProjectService._set_developers(db, project, data.developer_ids)
        db.commit()
        db.refresh(project)

        WorkflowStatusService.create_default_statuses(db, project)

        logger.info(f"Project {project.id} created by user {owner.id} with {len(data.developer_ids)} developer(s)")
        return project

    @staticmethod
    def update_project(db: Session, project: models.Project, data: ProjectUpdate) -> models.Project:
        fields = data.model_dump(exclude_unset=True)
        developer_ids = fields.pop("developer_ids", None)

        if "client_id" in fields:
            ProjectService._ensure_users_exist(db, [fields["client_id"]], "client_id")
        if "project_manager_id" in fields:
            ProjectService._ensure_users_exist(db, [fields["project_manager_id"]], "project_manager_id")

        for key, value in fields.items():
            if value is None and key in ("title", "status"):
                continue
            setattr(project, key, value)

        if developer_ids is not None:
            ProjectService._ensure_users_exist(db, developer_ids, "developer_ids")
            ProjectService._set_developers(db, project, developer_ids)

        db.commit()
        db.refresh(project)
        return project

    @staticmethod
    def delete_project(db: Session, project: models.Project, user: models.User) -> None:
        """
        Delete a project together with its tasks, statuses and members.

        Raises:
            PermissionDeniedError: Unless the user is an admin, the owner or the project manager
        """
        if not (user.is_admin or user.id in (project.owner_id, project.project_manager_id)):
            raise PermissionDeniedError("Only the owner or project manager can delete this project")

        project_id = project.id
        db.delete(project)
        db.commit()
        logger.info(f"Project {project_id} deleted by user {user.id}")

    @staticmethod
    def project_statistics(db: Session, user: models.User) -> ProjectStatistics:
        rows = (
            ProjectService.visible_projects_query(db, user)
            .with_entities(models.Project.status, func.count(models.Project.id))
            .group_by(models.Project.status)
            .all()
        )

        by_status = {status.value: 0 for status in ProjectStatus}
        for status, count in rows:
            by_status[status.value] = count

        return ProjectStatistics(total=sum(by_status.values()), by_status=by_status)
