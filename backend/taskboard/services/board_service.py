import logging
from collections import defaultdict
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..exceptions import NotFoundError
from ..schemas import TaskOrderItem, BoardResponse, BoardColumn, BoardCard, WorkflowStatus
from .task_service import TaskService
from .workflow_status_service import WorkflowStatusService

logger = logging.getLogger(__name__)


def _cards(tasks: List[models.Task]) -> List[BoardCard]:
    # Stored orders may have gaps or duplicates; positions are a dense rank
    return [
        BoardCard.model_validate(task).model_copy(update={"position": position})
        for position, task in enumerate(tasks)
    ]


class BoardService:
    """
    Service for the Kanban board: moving cards between columns and reordering them.

    A card's position is (workflow_status_id, order). Any column may follow any
    other; no transition is blocked, and reaching a completed column has no side
    effect on the task.
    """

    @staticmethod
    def move_task(
        db: Session,
        project: models.Project,
        task: models.Task,
        workflow_status_id: int,
        order: Optional[int] = None
    ) -> models.Task:
        """
        Move a task to a column, or to a new place in its current column.

        Without an explicit ``order`` a task entering a new column goes to its
        end and a task staying in its column keeps its order.

        Raises:
            NotFoundError: If the status is not a column of this project
        """
        target = WorkflowStatusService.get_project_status(db, project, workflow_status_id)
        source_id = task.workflow_status_id

        if order is None:
            if source_id == target.id:
                order = task.order
            else:
                order = TaskService.next_order(db, project.id, target.id)

        task.workflow_status_id = target.id
        task.order = order
        db.commit()
        db.refresh(task)

        logger.info(f"Task {task.id} moved from status {source_id} to {target.id} at order {order}")
        return task

    @staticmethod
    def reorder_tasks(db: Session, project: models.Project, items: List[TaskOrderItem]) -> List[models.Task]:
        """
        Apply a batch of (column, order) positions in one commit.

        Raises:
            NotFoundError: If a task or status is not part of this project; nothing is changed then
        """
        task_ids = [item.id for item in items]
        tasks = {
            task.id: task
            for task in db.query(models.Task).filter(
                models.Task.id.in_(task_ids),
                models.Task.project_id == project.id
            ).all()
        }
        missing_tasks = [task_id for task_id in task_ids if task_id not in tasks]
        if missing_tasks:
            raise NotFoundError(f"Task {missing_tasks[0]} not found")

        status_ids = {item.workflow_status_id for item in items}
        found_statuses = {
            status_id for (status_id,) in db.query(models.WorkflowStatus.id).filter(
                models.WorkflowStatus.id.in_(status_ids),
                models.WorkflowStatus.project_id == project.id
            ).all()
        }
        missing_statuses = sorted(status_ids - found_statuses)
        if missing_statuses:
            raise NotFoundError(f"Workflow status {missing_statuses[0]} not found")

        for item in items:
            tasks[item.id].workflow_status_id = item.workflow_status_id
            tasks[item.id].order = item.order
        db.commit()

        logger.info(f"Reordered {len(items)} task(s) in project {project.id}")
        return [tasks[task_id] for task_id in task_ids]

    @staticmethod
    def board(db: Session, project: models.Project) -> BoardResponse:
        """Columns in board order, each holding its cards sorted by (order, id)."""
        statuses = WorkflowStatusService.ordered_statuses(db, project)
        tasks = (
            db.query(models.Task)
            .filter(models.Task.project_id == project.id)
            .order_by(models.Task.order, models.Task.id)
            .all()
        )

        by_status = defaultdict(list)
        for task in tasks:
            by_status[task.workflow_status_id].append(task)

        columns = [
            BoardColumn(
                status=WorkflowStatus.model_validate(status),
                task_count=len(by_status[status.id]),
                tasks=_cards(by_status[status.id]),
            )
            for status in statuses
        ]

        return BoardResponse(
            project_id=project.id,
            columns=columns,
            unassigned=_cards(by_status[None]),
        )
