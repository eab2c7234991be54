from typing import Any, Dict, List

from taskboard.constants.messages import ResourceNames
from taskboard.exceptions.record_exceptions import RecordNotFoundException
from taskboard.models.assignee import AssigneeModel
from taskboard.repositories.assignee_repository import AssigneeRepository
from taskboard.utils.id_utils import generate_id
from taskboard_project.db.config import DatabaseManager


class AssigneeService:
    def __init__(self, database_manager: DatabaseManager):
        self.assignee_repository = AssigneeRepository(database_manager)

    def get_assignees(self) -> List[AssigneeModel]:
        return self.assignee_repository.list_all()

    def create_assignee(self, fields: Dict[str, Any]) -> AssigneeModel:
        return self.assignee_repository.create({"id": generate_id(), **fields})

    def get_assignee_by_id(self, assignee_id: str) -> AssigneeModel:
        assignee = self.assignee_repository.get_by_id(assignee_id)
        if not assignee:
            raise RecordNotFoundException(ResourceNames.ASSIGNEE, assignee_id)
        return assignee

    def update_assignee(self, assignee_id: str, fields: Dict[str, Any]) -> AssigneeModel:
        assignee = self.assignee_repository.update_by_field("id", assignee_id, fields)
        if not assignee:
            raise RecordNotFoundException(ResourceNames.ASSIGNEE, assignee_id)
        return assignee

    def delete_assignee(self, assignee_id: str) -> None:
        self.assignee_repository.delete_by_field("id", assignee_id)
