from unittest import TestCase
from unittest.mock import MagicMock, call, patch

from taskboard.exceptions.database_exceptions import DatabaseUnavailableException
from taskboard_project.db.config import DatabaseManager
from taskboard_project.db.init import initialize_database, wait_for_database


class WaitForDatabaseTests(TestCase):
    def setUp(self):
        self.database_manager = MagicMock(spec=DatabaseManager)

    @patch("taskboard_project.db.init.time.sleep")
    def test_returns_once_health_check_passes(self, mock_sleep):
        self.database_manager.check_database_health.side_effect = [False, True]

        wait_for_database(self.database_manager, max_retries=3, retry_delay=1)

        self.assertEqual(self.database_manager.check_database_health.call_count, 2)
        mock_sleep.assert_called_once_with(1)

    @patch("taskboard_project.db.init.time.sleep")
    def test_raises_after_all_attempts_fail(self, mock_sleep):
        self.database_manager.check_database_health.return_value = False

        with self.assertRaises(DatabaseUnavailableException):
            wait_for_database(self.database_manager, max_retries=3, retry_delay=1)

        self.assertEqual(self.database_manager.check_database_health.call_count, 3)
        self.assertEqual(mock_sleep.call_args_list, [call(1), call(1)])


class InitializeDatabaseTests(TestCase):
    def setUp(self):
        self.database_manager = MagicMock(spec=DatabaseManager)

    @patch("taskboard_project.db.init.seed_database")
    @patch("taskboard_project.db.init.AssignmentRepository")
    @patch("taskboard_project.db.init.AssigneeRepository")
    @patch("taskboard_project.db.init.TaskRepository")
    def test_ensures_indexes_then_seeds(
        self, mock_task_repository, mock_assignee_repository, mock_assignment_repository, mock_seed_database
    ):
        self.database_manager.check_database_health.return_value = True

        initialize_database(self.database_manager)

        for repository_class in (mock_task_repository, mock_assignee_repository, mock_assignment_repository):
            repository_class.assert_called_once_with(self.database_manager)
            repository_class.return_value.ensure_indexes.assert_called_once_with()
        mock_seed_database.assert_called_once_with(self.database_manager)

    @patch("taskboard_project.db.init.time.sleep")
    @patch("taskboard_project.db.init.seed_database")
    def test_does_not_seed_when_database_is_unreachable(self, mock_seed_database, mock_sleep):
        self.database_manager.check_database_health.return_value = False

        with self.assertRaises(DatabaseUnavailableException):
            initialize_database(self.database_manager, max_retries=2, retry_delay=0)

        mock_seed_database.assert_not_called()
