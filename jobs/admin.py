from django.contrib import admin

from rolepilot.admin import OwnedRecordAdmin

from .models import Job


@admin.register(Job)
class JobAdmin(OwnedRecordAdmin):
    """Admin interface for Job."""

    list_display = ['role_title', 'company', 'status', 'archived', 'user_id', 'created_at']
    list_filter = ['status', 'archived', 'created_at']
    search_fields = ['role_title', 'company', 'location', 'notes']

    fieldsets = (
        ('Basic Info', {
            'fields': ('company', 'role_title', 'status', 'archived')
        }),
        ('Details', {
            'fields': ('location', 'job_url', 'notes')
        }),
        ('Metadata', {
            'fields': ('id', 'user_id', 'created_at')
        }),
    )
