"""
Jobs app serializers

Serializers for Job model.
"""
from rest_framework import serializers

from rolepilot.normalize import to_optional_string

from .models import Job, JobStatus


class JobSerializer(serializers.ModelSerializer):
    """
    Serializer for Job.

    Applies the same rules as the app forms: unknown statuses become
    "saved" and blank optional text is stored as null.
    Owner is set from the authenticated user, never from the payload.
    """

    status = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )

    class Meta:
        model = Job
        fields = [
            'id',
            'company',
            'role_title',
            'status',
            'location',
            'job_url',
            'notes',
            'archived',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_status(self, value):
        return JobStatus.parse(value)

    def validate(self, attrs):
        for field in ('location', 'job_url', 'notes'):
            if field in attrs:
                attrs[field] = to_optional_string(attrs[field])
        if 'status' not in attrs and self.instance is None:
            attrs['status'] = JobStatus.SAVED
        return attrs
