"""
Jobs app views

ViewSet for Job management.
"""
from django.conf import settings
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from rolepilot.revalidate import revalidate_path

from .models import Job
from .serializers import JobSerializer


class JobViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Job.

    - POST: Create a job owned by the caller
    - GET: List the caller's jobs, newest first
    - GET {id}: Retrieve one of the caller's jobs
    - PUT/PATCH {id}: Update one of the caller's jobs
    - DELETE {id}: Delete one of the caller's jobs

    Jobs owned by other users are reported as not found.
    """

    serializer_class = JobSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Job.objects.owned_by(self.request.user.id)

    def perform_create(self, serializer):
        """Automatically set owner from the access token."""
        serializer.save(user_id=self.request.user.id)
        revalidate_path(settings.ROLEPILOT_APP_PATH, self.request.user.id)

    def perform_update(self, serializer):
        instance = serializer.instance
        Job.objects.update_owned(self.request.user.id, instance.pk, **serializer.validated_data)
        instance.refresh_from_db()
        revalidate_path(settings.ROLEPILOT_APP_PATH, self.request.user.id)

    def perform_destroy(self, instance):
        Job.objects.delete_owned(self.request.user.id, instance.id)
        revalidate_path(settings.ROLEPILOT_APP_PATH, self.request.user.id)
