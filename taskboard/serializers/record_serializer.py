from typing import Any, Dict

from rest_framework import serializers


class RecordSerializer(serializers.Serializer):
    """
    Type-checks the declared fields of a record body and keeps any other field as sent.

    Identifier and store-managed fields are dropped from the body.
    """

    managed_fields = ("id", "_id", "createdAt", "updatedAt")

    def get_fields_to_store(self) -> Dict[str, Any]:
        extra_fields = {
            key: value
            for key, value in self.initial_data.items()
            if key not in self.fields and key not in self.managed_fields
        }
        return {**extra_fields, **self.validated_data}
