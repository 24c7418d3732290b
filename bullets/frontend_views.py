"""
Frontend views for the bullet bank.
"""
from django.conf import settings
from django.shortcuts import redirect
from django.views.decorators.http import require_POST

from accounts.session import get_current_user
from rolepilot.mutations import flash_result

from .services import BulletService


@require_POST
def bullet_create(request):
    """Add a bullet to the caller's bank."""
    result = BulletService.create_bullet(get_current_user(request), request.POST)
    flash_result(request, result)
    return redirect(settings.ROLEPILOT_APP_PATH)


@require_POST
def bullet_update(request):
    result = BulletService.update_bullet(get_current_user(request), request.POST)
    flash_result(request, result)
    return redirect(settings.ROLEPILOT_APP_PATH)


@require_POST
def bullet_delete(request):
    result = BulletService.delete_bullet(get_current_user(request), request.POST)
    flash_result(request, result)
    return redirect(settings.ROLEPILOT_APP_PATH)
