from unittest import TestCase

from taskboard.serializers.assignee_serializer import AssigneeSerializer
from taskboard.serializers.task_serializer import TaskSerializer


class TaskSerializerTests(TestCase):
    def test_keeps_declared_and_undeclared_fields(self):
        serializer = TaskSerializer(data={"title": "Task 1", "progress": 42, "labels": ["api"]})

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.get_fields_to_store(), {"title": "Task 1", "progress": 42.0, "labels": ["api"]})

    def test_drops_identifier_and_timestamps(self):
        serializer = TaskSerializer(
            data={"id": "x", "_id": "y", "createdAt": "2024-01-01", "updatedAt": "2024-01-02", "status": "done"}
        )

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.get_fields_to_store(), {"status": "done"})

    def test_partial_update_only_returns_supplied_fields(self):
        serializer = TaskSerializer(data={"status": "done"}, partial=True)

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.get_fields_to_store(), {"status": "done"})

    def test_status_is_free_form(self):
        serializer = TaskSerializer(data={"status": "waiting on vendor"})

        self.assertTrue(serializer.is_valid())

    def test_rejects_non_numeric_progress(self):
        serializer = TaskSerializer(data={"progress": "half"})

        self.assertFalse(serializer.is_valid())
        self.assertIn("progress", serializer.errors)

    def test_keeps_surrounding_whitespace(self):
        serializer = TaskSerializer(data={"title": "  spaced  "})

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.get_fields_to_store()["title"], "  spaced  ")


class AssigneeSerializerTests(TestCase):
    def test_accepts_free_text_email(self):
        serializer = AssigneeSerializer(data={"email": "not-an-email", "initials": "AB"})

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.get_fields_to_store(), {"email": "not-an-email", "initials": "AB"})
