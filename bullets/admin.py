from django.contrib import admin

from rolepilot.admin import OwnedRecordAdmin

from .models import Bullet


@admin.register(Bullet)
class BulletAdmin(OwnedRecordAdmin):
    """Admin interface for Bullet."""

    list_display = ['category', 'bullet', 'company', 'role_title', 'user_id', 'created_at']
    list_filter = ['category', 'created_at']
    search_fields = ['bullet', 'impact', 'company', 'role_title']
