from django.apps import apps
from rest_framework.views import APIView

from taskboard_project.db.config import DatabaseManager


class DatabaseAPIView(APIView):
    """
    APIView holding the MongoDB handle its services run against.

    Pass `database_manager` to `as_view()` to inject one; otherwise the application's manager is used.
    """

    database_manager: DatabaseManager | None = None

    def get_database_manager(self) -> DatabaseManager:
        if self.database_manager is not None:
            return self.database_manager
        return apps.get_app_config("taskboard").database_manager
