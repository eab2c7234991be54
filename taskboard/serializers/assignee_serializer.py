from rest_framework import serializers

from taskboard.serializers.record_serializer import RecordSerializer


class AssigneeSerializer(RecordSerializer):
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    role = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    initials = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    color = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
