import time
from testcontainers.core.generic import DockerContainer
from pymongo import MongoClient
from pymongo.errors import PyMongoError
from testcontainers.core.waiting_utils import wait_for_logs


class MongoContainer(DockerContainer):
    """Single-node MongoDB; the API needs no replica set because it uses no transactions."""

    def __init__(self, image: str = "mongo:7.0"):
        super().__init__(image=image)
        self.with_exposed_ports(27017)
        self._mongo_url = None

    def start(self):
        super().start()
        wait_for_logs(self, r"Waiting for connections", timeout=30)
        mapped_port = self.get_exposed_port(27017)
        host = self.get_container_host_ip()
        self._mongo_url = f"mongodb://{host}:{mapped_port}/testdb"
        self._wait_for_ping()
        return self

    def get_connection_url(self) -> str:
        return self._mongo_url

    def _wait_for_ping(self, timeout=10):
        client = MongoClient(self.get_connection_url(), serverSelectionTimeoutMS=1000)
        start = time.time()
        try:
            while time.time() - start < timeout:
                try:
                    client.admin.command("ping")
                    return
                except PyMongoError as e:
                    print(f"Waiting for MongoDB: {e}")
                time.sleep(0.5)
        finally:
            client.close()
        raise TimeoutError("Timed out waiting for MongoDB to accept connections.")
