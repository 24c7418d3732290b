"""
Shared admin behavior for owner-scoped rows.
"""
from django.conf import settings
from django.contrib import admin

from .revalidate import revalidate_path


class OwnedRecordAdmin(admin.ModelAdmin):
    """
    Admin for rows owned by an auth API user.

    The owner id comes from the auth API, so rows are only created by their
    owners through the app. Edits and deletes here refresh the owner's page.
    """

    readonly_fields = ['id', 'user_id', 'created_at']

    def has_add_permission(self, request):
        return False

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        revalidate_path(settings.ROLEPILOT_APP_PATH, obj.user_id)

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        revalidate_path(settings.ROLEPILOT_APP_PATH, obj.user_id)

    def delete_queryset(self, request, queryset):
        owners = set(queryset.values_list('user_id', flat=True))
        super().delete_queryset(request, queryset)
        for user_id in owners:
            revalidate_path(settings.ROLEPILOT_APP_PATH, user_id)
