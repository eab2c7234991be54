from typing import List

from taskboard.models.assignment import AssignmentModel
from taskboard.repositories.common.mongo_repository import MongoRepository


class AssignmentRepository(MongoRepository[AssignmentModel]):
    model = AssignmentModel

    def get_by_task_id(self, task_id: str) -> List[AssignmentModel]:
        return self.find_many_by_field_in("taskId", [task_id])

    def get_by_assignee_id(self, assignee_id: str) -> List[AssignmentModel]:
        return self.find_many_by_field_in("assigneeId", [assignee_id])

    def delete_by_pair(self, task_id: str, assignee_id: str) -> None:
        self.delete_by_fields({"taskId": task_id, "assigneeId": assignee_id})
