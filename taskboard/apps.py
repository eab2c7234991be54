from django.apps import AppConfig
import atexit

from taskboard_project.db.config import DatabaseManager


class TaskboardConfig(AppConfig):
    name = "taskboard"
    database_manager: DatabaseManager | None = None

    def ready(self):
        """Build the process-wide MongoDB handle; it is closed when the interpreter exits."""
        self.database_manager = DatabaseManager.from_settings()
        atexit.register(self.database_manager.close)
