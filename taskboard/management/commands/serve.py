import logging

from django.apps import apps
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from taskboard.constants.messages import AppMessages, RepositoryErrors
from taskboard.exceptions.database_exceptions import DatabaseUnavailableException
from taskboard_project.db.init import initialize_database

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Connect to MongoDB, seed empty collections, then serve the API on the fixed port"

    def handle(self, *args, **options):
        database_manager = apps.get_app_config("taskboard").database_manager
        try:
            initialize_database(database_manager)
        except DatabaseUnavailableException as e:
            logger.error(RepositoryErrors.DB_INIT_FAILED.format(e.message))
            raise CommandError(RepositoryErrors.DB_INIT_FAILED.format(e.message)) from e

        self.stdout.write(self.style.SUCCESS(AppMessages.SERVER_RUNNING.format(settings.SERVER_PORT)))
        call_command("runserver", f"0.0.0.0:{settings.SERVER_PORT}", use_reloader=False)
