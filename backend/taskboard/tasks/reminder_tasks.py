import logging

from taskboard.core.celery import celery_app
from taskboard.db import get_db
from taskboard.services.reminder_service import ReminderService

logger = logging.getLogger(__name__)


@celery_app.task(name="taskboard.tasks.reminder_tasks.check_project_deadlines")
def check_project_deadlines() -> dict:
    """
    Daily sweep creating deadline reminders for upcoming project deadlines.

    Returns:
        Dictionary with the number of projects that produced reminders
    """
    db = None
    try:
        logger.info("Starting project deadline check")
        db = next(get_db())

        projects_notified = ReminderService.check_project_deadlines(db)

        logger.info(f"Project deadline check finished: {projects_notified} project(s) notified")
        return {"status": "success", "projects_notified": projects_notified}

    except Exception as e:
        logger.error(f"Project deadline check failed: {str(e)}")
        if db:
            db.rollback()
        raise

    finally:
        if db:
            db.close()
