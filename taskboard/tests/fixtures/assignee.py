from datetime import datetime, timezone

from bson import ObjectId

from taskboard.models.assignee import AssigneeModel

assignees_db_data = [
    {
        "_id": ObjectId(),
        "id": "c1e0f9a4-3b2d-4e8f-a6c7-1d2e3f4a5b01",
        "name": "Assignee 1",
        "role": "Developer",
        "email": "Assignee1.Developer@gmail.com",
        "initials": "AB",
        "color": "teal",
        "createdAt": datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
        "updatedAt": datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
    },
]

assignee_models = [
    AssigneeModel(**{key: value for key, value in assignee.items() if key != "_id"}) for assignee in assignees_db_data
]
