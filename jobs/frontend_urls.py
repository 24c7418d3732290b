"""
Frontend URLs for jobs app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('create/', frontend_views.job_create, name='job_create'),
    path('update/', frontend_views.job_update, name='job_update'),
    path('delete/', frontend_views.job_delete, name='job_delete'),
]
