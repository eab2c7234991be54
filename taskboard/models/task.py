from typing import ClassVar

from taskboard.models.common.document import Document


class TaskModel(Document):
    collection_name: ClassVar[str] = "tasks"

    title: str | None = None
    description: str | None = None
    status: str | None = None
    progress: int | float | None = None
