"""
URL configuration for rolepilot project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from bullets.views import BulletViewSet
from jobs.views import JobViewSet
from rolepilot.views import app_home, home

# Create router and register viewsets
router = DefaultRouter()
router.register(r'jobs', JobViewSet, basename='job')
router.register(r'bullets', BulletViewSet, basename='bullet')

urlpatterns = [
    # Frontend views
    path('', home, name='home'),
    path('', include('accounts.urls')),
    path('app/', app_home, name='app_home'),
    path('app/jobs/', include('jobs.frontend_urls')),
    path('app/bullets/', include('bullets.frontend_urls')),

    # API views
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
]
