"""
Request-level session gate.

Runs before any view: anonymous requests into the app area are sent to the
login page, and signed-in users visiting the login page are sent to the app.
"""
from urllib.parse import urlencode

from django.conf import settings
from django.shortcuts import redirect

from .session import get_current_user


def _strip(path: str) -> str:
    return path.rstrip('/') or '/'


class SessionGateMiddleware:
    """
    Redirect based on authentication state.

    - `/app` or anything under `/app/` without a session -> login page with
      `next=<requested path>`
    - login page with a session -> the app, query string dropped
    - everything else passes through untouched
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.gate(request)
        if response is not None:
            return response
        return self.get_response(request)

    def gate(self, request):
        app_path = _strip(settings.ROLEPILOT_APP_PATH)
        login_path = _strip(settings.LOGIN_URL)
        path = request.path

        if path == app_path or path.startswith(app_path + '/'):
            if get_current_user(request) is None:
                return redirect(f"{settings.LOGIN_URL}?{urlencode({'next': path})}")
            return None

        if _strip(path) == login_path and get_current_user(request) is not None:
            return redirect(settings.ROLEPILOT_APP_PATH)

        return None
