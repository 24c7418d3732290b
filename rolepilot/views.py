"""
Main project views for frontend pages.
"""
from django.conf import settings
from django.shortcuts import render

from accounts.session import get_current_user
from bullets.models import Bullet
from jobs.models import Job, JobStatus

from .revalidate import cached_page_rows


def home(request):
    """Public landing page."""
    return render(request, 'rolepilot/home.html', {
        'app_path': settings.ROLEPILOT_APP_PATH,
    })


def app_home(request):
    """
    Main app page: the caller's jobs and bullet bank with edit forms.

    The session gate guarantees a signed-in user here.
    """
    user = get_current_user(request)

    def load_rows():
        return {
            'jobs': list(Job.objects.owned_by(user.id).order_by('-created_at')),
            'bullets': list(Bullet.objects.owned_by(user.id).order_by('-created_at')),
        }

    rows = cached_page_rows(settings.ROLEPILOT_APP_PATH, user.id, load_rows)

    context = {
        'account': user,
        'jobs': rows['jobs'],
        'bullets': rows['bullets'],
        'status_choices': JobStatus.choices,
    }
    return render(request, 'rolepilot/app.html', context)
