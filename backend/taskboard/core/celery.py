from celery import Celery
from celery.schedules import crontab
from taskboard.core.settings import get_settings

settings = get_settings()

celery_app = Celery(
    "taskboard",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["taskboard.tasks.reminder_tasks"]
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    result_expires=3600,
)

# Run with: celery -A taskboard.core.celery beat
celery_app.conf.beat_schedule = {
    "check-project-deadlines": {
        "task": "taskboard.tasks.reminder_tasks.check_project_deadlines",
        "schedule": crontab(hour=8, minute=0),
    },
}
