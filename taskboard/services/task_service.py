from typing import Any, Dict, List

from taskboard.constants.messages import ResourceNames
from taskboard.exceptions.record_exceptions import RecordNotFoundException
from taskboard.models.task import TaskModel
from taskboard.repositories.task_repository import TaskRepository
from taskboard.utils.id_utils import generate_id
from taskboard_project.db.config import DatabaseManager


class TaskService:
    def __init__(self, database_manager: DatabaseManager):
        self.task_repository = TaskRepository(database_manager)

    def get_tasks(self) -> List[TaskModel]:
        return self.task_repository.list_all()

    def create_task(self, fields: Dict[str, Any]) -> TaskModel:
        return self.task_repository.create({"id": generate_id(), **fields})

    def get_task_by_id(self, task_id: str) -> TaskModel:
        task = self.task_repository.get_by_id(task_id)
        if not task:
            raise RecordNotFoundException(ResourceNames.TASK, task_id)
        return task

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> TaskModel:
        task = self.task_repository.update_by_field("id", task_id, fields)
        if not task:
            raise RecordNotFoundException(ResourceNames.TASK, task_id)
        return task

    def delete_task(self, task_id: str) -> None:
        self.task_repository.delete_by_field("id", task_id)
