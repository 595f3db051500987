import logging
import re
from collections import defaultdict
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..exceptions import NotFoundError, PermissionDeniedError, ValidationError
from ..schemas import CommentCreate, CommentUpdate, Comment, CommentThread

logger = logging.getLogger(__name__)

# Inline mention token written by the editor: @[Display Name](user_id)
MENTION_PATTERN = re.compile(r"@\[([^\]]+)\]\((\d+)\)")


def extract_mentions(content: str) -> List[int]:
    """User ids mentioned in ``content``, in order of first appearance."""
    ids = [int(match.group(2)) for match in MENTION_PATTERN.finditer(content or "")]
    return list(dict.fromkeys(ids))


class CommentService:
    """Service for one-level threaded comments on tasks."""

    @staticmethod
    def _resolve_mentions(db: Session, content: str, mentions: Optional[List[int]]) -> List[int]:
        """
        Mentions supplied by the client are kept as given once the users are known to exist;
        when omitted they are read from the content and unknown ids are dropped.
        """
        strict = mentions is not None
        candidates = list(dict.fromkeys(mentions)) if strict else extract_mentions(content)
        if not candidates:
            return []

        found = {
            user_id for (user_id,) in db.query(models.User.id).filter(models.User.id.in_(candidates)).all()
        }
        missing = [user_id for user_id in candidates if user_id not in found]
        if missing and strict:
            raise ValidationError(f"Unknown user id(s): {', '.join(map(str, missing))}", field="mentions")
        return [user_id for user_id in candidates if user_id in found]

    @staticmethod
    def get_task_comment(db: Session, task: models.Task, comment_id: int) -> models.TaskComment:
        """
        Raises:
            NotFoundError: If the comment does not exist or belongs to another task
        """
        comment = db.query(models.TaskComment).filter(models.TaskComment.id == comment_id).first()
        if comment is None or comment.task_id != task.id:
            raise NotFoundError("Comment not found")
        return comment

    @staticmethod
    def post_comment(db: Session, task: models.Task, user: models.User, data: CommentCreate) -> models.TaskComment:
        """
        Add a comment or a reply to a task.

        A reply to a reply is attached to the top-level comment of its thread.

        Raises:
            NotFoundError: If the parent comment is not on this task
            ValidationError: If explicit mentions reference unknown users
        """
        parent_id = data.parent_id
        if parent_id is not None:
            parent = CommentService.get_task_comment(db, task, parent_id)
            parent_id = parent.parent_id or parent.id

        comment = models.TaskComment(
            task_id=task.id,
            user_id=user.id,
            parent_id=parent_id,
            content=data.content,
            mentions=CommentService._resolve_mentions(db, data.content, data.mentions),
        )
        db.add(comment)
        db.commit()
        db.refresh(comment)

        logger.info(f"Comment {comment.id} posted on task {task.id} by user {user.id}")
        return comment

    @staticmethod
    def list_comments(db: Session, task: models.Task) -> List[CommentThread]:
        """Top-level comments oldest first, each with its replies oldest first."""
        comments = (
            db.query(models.TaskComment)
            .filter(models.TaskComment.task_id == task.id)
            .order_by(models.TaskComment.created_at, models.TaskComment.id)
            .all()
        )

        replies = defaultdict(list)
        for comment in comments:
            if comment.parent_id is not None:
                replies[comment.parent_id].append(Comment.model_validate(comment))

        return [
            CommentThread(
                **Comment.model_validate(comment).model_dump(),
                replies=replies[comment.id],
            )
            for comment in comments
            if comment.parent_id is None
        ]

    @staticmethod
    def update_comment(
        db: Session,
        comment: models.TaskComment,
        user: models.User,
        data: CommentUpdate
    ) -> models.TaskComment:
        if comment.user_id != user.id:
            raise PermissionDeniedError("Only the author can edit this comment")

        comment.content = data.content
        comment.mentions = CommentService._resolve_mentions(db, data.content, data.mentions)
        db.commit()
        db.refresh(comment)
        return comment

    @staticmethod
    def delete_comment(db: Session, comment: models.TaskComment, user: models.User) -> None:
        """Delete a comment and its replies; allowed for the author and admins."""
        if comment.user_id != user.id and not user.is_admin:
            raise PermissionDeniedError("Only the author or an admin can delete this comment")

        comment_id = comment.id
        db.delete(comment)
        db.commit()
        logger.info(f"Comment {comment_id} deleted by user {user.id}")
