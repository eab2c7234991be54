from .base import *

# No SQL database is used; records live in MongoDB only.
# Integration tests start their own MongoDB through testcontainers.
DATABASES = {}

LOGGING["loggers"]["taskboard"]["level"] = "WARNING"
LOGGING["loggers"]["taskboard_project"]["level"] = "WARNING"
