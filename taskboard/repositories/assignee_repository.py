from typing import Optional

from taskboard.models.assignee import AssigneeModel
from taskboard.repositories.common.mongo_repository import MongoRepository


class AssigneeRepository(MongoRepository[AssigneeModel]):
    model = AssigneeModel

    def get_by_id(self, assignee_id: str) -> Optional[AssigneeModel]:
        return self.find_by_field("id", assignee_id)
