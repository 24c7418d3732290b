"""
Accounts app views

Sign-in pages backed by the hosted auth API: email magic link, Google
OAuth, the code-exchange callback, and sign out.
"""
import logging
from urllib.parse import urlencode

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .bridge import AuthBridge, AuthBridgeError, code_challenge_for, generate_code_verifier
from .forms import MagicLinkForm
from .session import CODE_VERIFIER_KEY, clear_session, store_session

logger = logging.getLogger(__name__)

MAGIC_LINK_SENT = "Check your email for a secure sign-in link."
MAGIC_LINK_FAILED = "Unable to send sign-in link. Check configuration and try again."
OAUTH_FAILED = "Google sign-in failed. Check provider settings and try again."
CALLBACK_FAILED = "auth_callback_failed"


def safe_next_path(value):
    """Keep `value` only if it is a path on this site; otherwise the app."""
    if (
        value
        and value.startswith('/')
        and url_has_allowed_host_and_scheme(value, allowed_hosts=None)
    ):
        return value
    return settings.ROLEPILOT_APP_PATH


def _login_url(next_path: str) -> str:
    return f"{reverse('login')}?{urlencode({'next': next_path})}"


def _callback_url(request, next_path: str) -> str:
    callback = request.build_absolute_uri(reverse('auth_callback'))
    return f"{callback}?{urlencode({'next': next_path})}"


def _start_pkce(request) -> str:
    """Store a new PKCE verifier in the session and return its challenge."""
    verifier = generate_code_verifier()
    request.session[CODE_VERIFIER_KEY] = verifier
    return code_challenge_for(verifier)


@require_http_methods(['GET', 'POST'])
def login_view(request):
    """Show sign-in options and send magic links."""
    next_path = safe_next_path(request.POST.get('next') or request.GET.get('next'))

    if request.method == 'POST':
        form = MagicLinkForm(request.POST)
        if form.is_valid():
            challenge = _start_pkce(request)
            try:
                AuthBridge.from_settings().sign_in_with_otp(
                    form.cleaned_data['email'],
                    redirect_to=_callback_url(request, next_path),
                    code_challenge=challenge,
                )
            except AuthBridgeError as exc:
                logger.warning("Magic link request failed: %s", exc)
                messages.error(request, MAGIC_LINK_FAILED)
            else:
                messages.success(request, MAGIC_LINK_SENT)
                return redirect(_login_url(next_path))
    else:
        form = MagicLinkForm()

    return render(request, 'accounts/login.html', {
        'form': form,
        'next_path': next_path,
        'auth_error': bool(request.GET.get('error')),
    })


@require_GET
def google_login(request):
    """Send the browser to the OAuth provider."""
    next_path = safe_next_path(request.GET.get('next'))
    challenge = _start_pkce(request)
    try:
        url = AuthBridge.from_settings().authorize_url(
            settings.SUPABASE_OAUTH_PROVIDER,
            redirect_to=_callback_url(request, next_path),
            code_challenge=challenge,
        )
    except AuthBridgeError as exc:
        logger.warning("OAuth sign-in could not start: %s", exc)
        messages.error(request, OAUTH_FAILED)
        return redirect(_login_url(next_path))
    return redirect(url)


@require_GET
def auth_callback(request):
    """
    Finish a sign-in redirect.

    Exchanges the one-time code for a session and continues to `next`.
    Any failure lands on the login page with an error marker.
    """
    code = request.GET.get('code')
    next_path = safe_next_path(request.GET.get('next'))
    verifier = request.session.get(CODE_VERIFIER_KEY)

    if code and verifier:
        try:
            payload = AuthBridge.from_settings().exchange_code_for_session(code, verifier)
        except AuthBridgeError as exc:
            logger.warning("Auth code exchange failed: %s", exc)
        else:
            store_session(request, payload)
            return redirect(next_path)
    elif code:
        logger.warning("Auth callback without a PKCE verifier in session")

    return redirect(f"{reverse('login')}?{urlencode({'error': CALLBACK_FAILED})}")


@require_POST
def logout_view(request):
    """Handle user logout."""
    access_token = clear_session(request)
    if access_token:
        try:
            AuthBridge.from_settings().sign_out(access_token)
        except AuthBridgeError as exc:
            logger.info("Remote sign out failed: %s", exc)
    return redirect('login')
