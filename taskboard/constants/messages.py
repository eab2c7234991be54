# Application Messages
class AppMessages:
    SERVER_RUNNING = "Server running at http://localhost:{0}"
    SEED_INSERTED = "Seeded {0} {1}"
    SEED_SKIPPED = "Collection {0} already has {1} records, skipping seed"


# Repository error messages
class RepositoryErrors:
    DB_INIT_FAILED = "Failed to initialize database: {0}"
    DB_UNREACHABLE = "MongoDB is unreachable after {0} attempts"


# API error messages
class ApiErrors:
    RESOURCE_NOT_FOUND = "{0} not found"
    INTERNAL_SERVER_ERROR = "Internal server error"


# Resource names used in not-found messages
class ResourceNames:
    TASK = "Task"
    ASSIGNEE = "Assignee"
