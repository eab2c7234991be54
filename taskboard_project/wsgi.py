from django.apps import apps
from django.core.wsgi import get_wsgi_application

from taskboard_project.db.init import initialize_database
from taskboard_project.settings.configure import configure_settings_module

configure_settings_module()

application = get_wsgi_application()

# Seeding finishes before the server accepts traffic; an unreachable store aborts startup.
initialize_database(apps.get_app_config("taskboard").database_manager)
