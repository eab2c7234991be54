from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Document(BaseModel):
    """
    Base for records stored in a MongoDB collection.

    `id` is the application identifier and is unrelated to MongoDB's `_id`.
    Undeclared fields are kept so that request bodies round-trip unchanged.
    """

    collection_name: ClassVar[str]

    id: str
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    model_config = ConfigDict(extra="allow")

    def to_response(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)
