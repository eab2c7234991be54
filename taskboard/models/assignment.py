from typing import ClassVar

from taskboard.models.common.document import Document


class AssignmentModel(Document):
    """
    One edge between a task and an assignee.

    Neither side is checked for existence and the same pair may be linked more than once.
    """

    collection_name: ClassVar[str] = "assignments"

    taskId: str
    assigneeId: str
