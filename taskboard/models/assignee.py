from typing import ClassVar

from taskboard.models.common.document import Document


class AssigneeModel(Document):
    collection_name: ClassVar[str] = "assignees"

    name: str | None = None
    role: str | None = None
    email: str | None = None
    initials: str | None = None
    color: str | None = None
