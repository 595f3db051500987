from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from taskboard import models
from taskboard.tasks.reminder_tasks import check_project_deadlines


class TestCheckProjectDeadlinesTask:
    def test_creates_reminders(self, db_session, make_project, manager, developers):
        make_project(manager, developers, deadline=datetime.now(timezone.utc).date() + timedelta(days=1))

        with patch("taskboard.tasks.reminder_tasks.get_db", return_value=iter([db_session])), \
                patch.object(db_session, "close") as mock_close:
            result = check_project_deadlines.run()

        assert result == {"status": "success", "projects_notified": 1}
        assert db_session.query(models.Reminder).count() == 4
        mock_close.assert_called_once()

    def test_failure_rolls_back_and_reraises(self, db_session):
        with patch("taskboard.tasks.reminder_tasks.get_db", return_value=iter([db_session])), \
                patch.object(db_session, "close"), \
                patch.object(db_session, "rollback") as mock_rollback, \
                patch(
                    "taskboard.tasks.reminder_tasks.ReminderService.check_project_deadlines",
                    side_effect=RuntimeError("db down"),
                ):
            with pytest.raises(RuntimeError):
                check_project_deadlines.run()

        mock_rollback.assert_called_once()
