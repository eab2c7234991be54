import logging
import random
from typing import Any, Dict, List

from taskboard.constants.messages import AppMessages
from taskboard.repositories.assignee_repository import AssigneeRepository
from taskboard.repositories.common.mongo_repository import MongoRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.utils.id_utils import generate_id
from taskboard_project.db.config import DatabaseManager

logger = logging.getLogger(__name__)

SEED_TASK_COUNT = 20
SEED_ASSIGNEE_COUNT = 10


def build_seed_tasks(count: int = SEED_TASK_COUNT) -> List[Dict[str, Any]]:
    return [
        {
            "id": generate_id(),
            "title": f"Task {number}",
            "description": f"Description for Task {number}",
            "status": "pending",
            "progress": random.randint(0, 99),
        }
        for number in range(1, count + 1)
    ]


def build_seed_assignees(count: int = SEED_ASSIGNEE_COUNT) -> List[Dict[str, Any]]:
    return [
        {
            "id": generate_id(),
            "name": f"Assignee {number}",
            "role": "Developer",
            "email": f"Assignee{number}.Developer@gmail.com",
            "initials": "AB",
            "color": "teal",
        }
        for number in range(1, count + 1)
    ]


def seed_collection(repository: MongoRepository, records: List[Dict[str, Any]]) -> int:
    """
    Insert `records` only when the collection is empty. Returns how many were inserted.
    """
    existing_count = repository.count()
    if existing_count != 0:
        logger.info(AppMessages.SEED_SKIPPED.format(repository.collection_name, existing_count))
        return 0

    repository.create_many(records)
    logger.info(AppMessages.SEED_INSERTED.format(len(records), repository.collection_name))
    return len(records)


def seed_database(database_manager: DatabaseManager) -> Dict[str, int]:
    """
    Populate empty task and assignee collections with synthetic records.

    Each collection is checked on its own, so an existing task list does not stop
    assignees from being seeded. Assignments are never seeded.
    """
    task_repository = TaskRepository(database_manager)
    assignee_repository = AssigneeRepository(database_manager)

    return {
        task_repository.collection_name: seed_collection(task_repository, build_seed_tasks()),
        assignee_repository.collection_name: seed_collection(assignee_repository, build_seed_assignees()),
    }
