from taskboard.constants.messages import ApiErrors


class RecordNotFoundException(Exception):
    def __init__(self, resource_name: str, record_id: str | None = None):
        self.resource_name = resource_name
        self.record_id = record_id
        self.message = ApiErrors.RESOURCE_NOT_FOUND.format(resource_name)
        super().__init__(self.message)
