from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from taskboard.exceptions.database_exceptions import DatabaseUnavailableException
from taskboard_project.db.init import wait_for_database
from taskboard_project.db.seed import seed_database


class Command(BaseCommand):
    help = "Seed empty task and assignee collections with synthetic records"

    def handle(self, *args, **options):
        database_manager = apps.get_app_config("taskboard").database_manager
        try:
            wait_for_database(database_manager)
        except DatabaseUnavailableException as e:
            raise CommandError(e.message) from e

        inserted = seed_database(database_manager)
        for collection_name, count in inserted.items():
            self.stdout.write(self.style.SUCCESS(f"{collection_name}: {count} records inserted"))
