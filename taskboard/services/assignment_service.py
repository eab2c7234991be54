from typing import List

from taskboard.models.assignee import AssigneeModel
from taskboard.models.assignment import AssignmentModel
from taskboard.models.task import TaskModel
from taskboard.repositories.assignee_repository import AssigneeRepository
from taskboard.repositories.assignment_repository import AssignmentRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.utils.id_utils import generate_id
from taskboard_project.db.config import DatabaseManager


class AssignmentService:
    """
    Links tasks and assignees.

    The referenced task and assignee are never looked up when linking or unlinking,
    and repeated links for the same pair are stored as separate assignments.
    """

    def __init__(self, database_manager: DatabaseManager):
        self.assignment_repository = AssignmentRepository(database_manager)
        self.task_repository = TaskRepository(database_manager)
        self.assignee_repository = AssigneeRepository(database_manager)

    def get_assignments(self) -> List[AssignmentModel]:
        return self.assignment_repository.list_all()

    def assign(self, task_id: str, assignee_id: str) -> AssignmentModel:
        return self.assignment_repository.create({"id": generate_id(), "taskId": task_id, "assigneeId": assignee_id})

    def unassign(self, task_id: str, assignee_id: str) -> None:
        self.assignment_repository.delete_by_pair(task_id, assignee_id)

    def get_tasks_for_assignee(self, assignee_id: str) -> List[TaskModel]:
        assignments = self.assignment_repository.get_by_assignee_id(assignee_id)
        task_ids = [assignment.taskId for assignment in assignments]
        return self.task_repository.find_many_by_field_in("id", task_ids)

    def get_assignees_for_task(self, task_id: str) -> List[AssigneeModel]:
        assignments = self.assignment_repository.get_by_task_id(task_id)
        assignee_ids = [assignment.assigneeId for assignment in assignments]
        return self.assignee_repository.find_many_by_field_in("id", assignee_ids)
