import logging
import threading
from typing import Optional

from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Owns the MongoDB client for the lifetime of the process.

    The client is created on first use, so constructing a manager never touches the network.
    One manager is built by the application config and handed to views and startup code.
    """

    def __init__(self, uri: Optional[str], db_name: Optional[str] = None, server_selection_timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._database_client: Optional[MongoClient] = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls) -> "DatabaseManager":
        return cls(
            uri=settings.MONGODB_URI,
            db_name=settings.DB_NAME,
            server_selection_timeout_ms=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )

    @property
    def client(self) -> MongoClient:
        with self._lock:
            if self._database_client is None:
                self._database_client = MongoClient(
                    self.uri,
                    tz_aware=True,
                    serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                )
            return self._database_client

    def get_database(self) -> Database:
        if self.db_name:
            return self.client.get_database(self.db_name)
        return self.client.get_default_database(default=settings.DEFAULT_DB_NAME)

    def get_collection(self, collection_name: str) -> Collection:
        return self.get_database()[collection_name]

    def check_database_health(self) -> bool:
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {str(e)}")
            return False

    def close(self) -> None:
        with self._lock:
            if self._database_client is not None:
                self._database_client.close()
                self._database_client = None
                logger.info("MongoDB connection closed")
