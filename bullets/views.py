"""
Bullets app views

ViewSet for the bullet bank.
"""
from django.conf import settings
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from rolepilot.revalidate import revalidate_path

from .models import Bullet
from .serializers import BulletSerializer


class BulletViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Bullet.

    Lists, creates, updates and deletes the caller's bullets only.
    """

    serializer_class = BulletSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Bullet.objects.owned_by(self.request.user.id)

    def perform_create(self, serializer):
        serializer.save(user_id=self.request.user.id)
        revalidate_path(settings.ROLEPILOT_APP_PATH, self.request.user.id)

    def perform_update(self, serializer):
        instance = serializer.instance
        Bullet.objects.update_owned(self.request.user.id, instance.pk, **serializer.validated_data)
        instance.refresh_from_db()
        revalidate_path(settings.ROLEPILOT_APP_PATH, self.request.user.id)

    def perform_destroy(self, instance):
        Bullet.objects.delete_owned(self.request.user.id, instance.id)
        revalidate_path(settings.ROLEPILOT_APP_PATH, self.request.user.id)
