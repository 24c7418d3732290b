"""
Frontend URLs for bullets app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('create/', frontend_views.bullet_create, name='bullet_create'),
    path('update/', frontend_views.bullet_update, name='bullet_update'),
    path('delete/', frontend_views.bullet_delete, name='bullet_delete'),
]
