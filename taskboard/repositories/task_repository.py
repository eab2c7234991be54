from typing import Optional

from taskboard.models.task import TaskModel
from taskboard.repositories.common.mongo_repository import MongoRepository


class TaskRepository(MongoRepository[TaskModel]):
    model = TaskModel

    def get_by_id(self, task_id: str) -> Optional[TaskModel]:
        return self.find_by_field("id", task_id)
