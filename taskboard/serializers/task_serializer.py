from rest_framework import serializers

from taskboard.serializers.record_serializer import RecordSerializer


class TaskSerializer(RecordSerializer):
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    progress = serializers.FloatField(required=False, allow_null=True)
