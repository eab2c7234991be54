import logging
import time

from taskboard.constants.messages import RepositoryErrors
from taskboard.exceptions.database_exceptions import DatabaseUnavailableException
from taskboard.repositories.assignee_repository import AssigneeRepository
from taskboard.repositories.assignment_repository import AssignmentRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard_project.db.config import DatabaseManager
from taskboard_project.db.seed import seed_database

logger = logging.getLogger(__name__)


def wait_for_database(database_manager: DatabaseManager, max_retries=5, retry_delay=2) -> None:
    for attempt in range(max_retries):
        if database_manager.check_database_health():
            logger.info("Connected to MongoDB")
            return
        if attempt < max_retries - 1:
            logger.warning(
                f"Database health check failed, attempt {attempt + 1}. Retrying in {retry_delay} seconds..."
            )
            time.sleep(retry_delay)

    logger.error("All database connection attempts failed")
    raise DatabaseUnavailableException(RepositoryErrors.DB_UNREACHABLE.format(max_retries))


def initialize_database(database_manager: DatabaseManager, max_retries=5, retry_delay=2) -> None:
    """
    Prepare MongoDB before any request is served.

    Waits for the server, ensures the unique identifier index on every collection
    and seeds empty collections. Raises DatabaseUnavailableException when MongoDB
    cannot be reached.
    """
    wait_for_database(database_manager, max_retries=max_retries, retry_delay=retry_delay)

    for repository_class in (TaskRepository, AssigneeRepository, AssignmentRepository):
        repository_class(database_manager).ensure_indexes()

    seed_database(database_manager)
    logger.info("Database initialization completed successfully")
