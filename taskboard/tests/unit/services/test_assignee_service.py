from unittest import TestCase
from unittest.mock import MagicMock, patch

from taskboard.exceptions.record_exceptions import RecordNotFoundException
from taskboard.services.assignee_service import AssigneeService
from taskboard.tests.fixtures.assignee import assignee_models
from taskboard_project.db.config import DatabaseManager


class AssigneeServiceTests(TestCase):
    def setUp(self):
        self.patcher_repository = patch("taskboard.services.assignee_service.AssigneeRepository")
        self.mock_repository = self.patcher_repository.start().return_value
        self.service = AssigneeService(MagicMock(spec=DatabaseManager))

    def tearDown(self):
        self.patcher_repository.stop()

    @patch("taskboard.services.assignee_service.generate_id", return_value="generated-id")
    def test_create_assignee_assigns_new_id(self, mock_generate_id):
        self.mock_repository.create.return_value = assignee_models[0]

        result = self.service.create_assignee({"name": "Ada", "role": "Developer"})

        self.mock_repository.create.assert_called_once_with({"id": "generated-id", "name": "Ada", "role": "Developer"})
        self.assertEqual(result, assignee_models[0])

    def test_get_assignee_by_id_raises_with_assignee_message(self):
        self.mock_repository.get_by_id.return_value = None

        with self.assertRaises(RecordNotFoundException) as context:
            self.service.get_assignee_by_id("missing")

        self.assertEqual(context.exception.message, "Assignee not found")

    def test_update_assignee_raises_when_missing(self):
        self.mock_repository.update_by_field.return_value = None

        with self.assertRaises(RecordNotFoundException):
            self.service.update_assignee("missing", {"color": "red"})

    def test_delete_assignee(self):
        self.service.delete_assignee("assignee-1")

        self.mock_repository.delete_by_field.assert_called_once_with("id", "assignee-1")
