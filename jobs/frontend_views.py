"""
Frontend views for jobs app.

Form posts from the app page. Each view hands the submission to JobService
and sends the browser back to the app page.
"""
from django.conf import settings
from django.shortcuts import redirect
from django.views.decorators.http import require_POST

from accounts.session import get_current_user
from rolepilot.mutations import flash_result

from .services import JobService


@require_POST
def job_create(request):
    """Create a job from the new-job form."""
    result = JobService.create_job(get_current_user(request), request.POST)
    flash_result(request, result)
    return redirect(settings.ROLEPILOT_APP_PATH)


@require_POST
def job_update(request):
    """Save edits to one of the caller's jobs."""
    result = JobService.update_job(get_current_user(request), request.POST)
    flash_result(request, result)
    return redirect(settings.ROLEPILOT_APP_PATH)


@require_POST
def job_delete(request):
    result = JobService.delete_job(get_current_user(request), request.POST)
    flash_result(request, result)
    return redirect(settings.ROLEPILOT_APP_PATH)
