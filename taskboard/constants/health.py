from enum import Enum
from http import HTTPStatus


class AppHealthStatus(Enum):
    UP = HTTPStatus.OK
    DOWN = HTTPStatus.SERVICE_UNAVAILABLE

    @property
    def http_status(self) -> int:
        return self.value.value


class ComponentHealthStatus(Enum):
    UP = "UP"
    DOWN = "DOWN"
