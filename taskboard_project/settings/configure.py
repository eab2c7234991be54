import os
from dotenv import load_dotenv

load_dotenv()

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "taskboard_project.settings.base")


def configure_settings_module():
    """
    Point Django at the project settings unless the environment already names a module.
    Test runs select taskboard_project.settings.test through pytest configuration.
    """
    return os.environ["DJANGO_SETTINGS_MODULE"]
