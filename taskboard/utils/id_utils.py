import uuid


def generate_id() -> str:
    """Random UUID4 string used as the application identifier of every record."""
    return str(uuid.uuid4())
