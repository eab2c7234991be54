from datetime import datetime, timezone
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pymongo import ReturnDocument
from pymongo.collection import Collection

from taskboard.models.common.document import Document
from taskboard_project.db.config import DatabaseManager

T = TypeVar("T", bound=Document)


class MongoRepository(Generic[T]):
    """
    Record store over a single MongoDB collection.

    Lookups, updates and deletes address records by their application fields, never by `_id`.
    Single-record updates and deletes act on the first match only.
    """

    model: Type[T]

    def __init__(self, database_manager: DatabaseManager):
        self.database_manager = database_manager

    @property
    def collection_name(self) -> str:
        return self.model.collection_name

    def get_collection(self) -> Collection:
        return self.database_manager.get_collection(self.collection_name)

    def _to_model(self, document: Mapping[str, Any]) -> T:
        data = dict(document)
        data.pop("_id", None)
        return self.model(**data)

    def ensure_indexes(self) -> None:
        self.get_collection().create_index("id", unique=True)

    def count(self) -> int:
        return self.get_collection().count_documents({})

    def list_all(self) -> List[T]:
        cursor = self.get_collection().find({})
        return [self._to_model(document) for document in cursor]

    def find_by_field(self, field_name: str, value: Any) -> Optional[T]:
        document = self.get_collection().find_one({field_name: value})
        if not document:
            return None
        return self._to_model(document)

    def find_many_by_field_in(self, field_name: str, values: Iterable[Any]) -> List[T]:
        values = list(values)
        if len(values) == 0:
            return []
        cursor = self.get_collection().find({field_name: {"$in": values}})
        return [self._to_model(document) for document in cursor]

    def create(self, record: Dict[str, Any]) -> T:
        now = datetime.now(timezone.utc)
        document = {**record, "createdAt": now, "updatedAt": now}
        self.get_collection().insert_one(document)
        return self._to_model(document)

    def create_many(self, records: List[Dict[str, Any]]) -> List[T]:
        if len(records) == 0:
            return []
        now = datetime.now(timezone.utc)
        documents = [{**record, "createdAt": now, "updatedAt": now} for record in records]
        self.get_collection().insert_many(documents)
        return [self._to_model(document) for document in documents]

    def update_by_field(self, field_name: str, value: Any, fields: Dict[str, Any]) -> Optional[T]:
        updated_document = self.get_collection().find_one_and_update(
            {field_name: value},
            {"$set": {**fields, "updatedAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        if not updated_document:
            return None
        return self._to_model(updated_document)

    def delete_by_field(self, field_name: str, value: Any) -> None:
        self.get_collection().delete_one({field_name: value})

    def delete_by_fields(self, filters: Dict[str, Any]) -> None:
        self.get_collection().delete_one(dict(filters))
