"""
Session handling for auth API tokens.

Access and refresh tokens are kept in the Django session. The signed-in
user is resolved once per request and memoized on the request object, so
the session gate and the view share a single round trip to the auth API.
"""
import logging
from typing import Dict, Optional

from .bridge import AuthBridge, AuthBridgeError, BridgeUser

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = 'auth_access_token'
REFRESH_TOKEN_KEY = 'auth_refresh_token'
CODE_VERIFIER_KEY = 'auth_code_verifier'

_REQUEST_CACHE_ATTR = '_bridge_user'


def get_current_user(request) -> Optional[BridgeUser]:
    """
    Return the signed-in user for `request`, or None.

    Any auth API failure is treated as "not signed in".
    """
    if not hasattr(request, _REQUEST_CACHE_ATTR):
        setattr(request, _REQUEST_CACHE_ATTR, _resolve_user(request))
    return getattr(request, _REQUEST_CACHE_ATTR)


def _resolve_user(request) -> Optional[BridgeUser]:
    session = getattr(request, 'session', None)
    if session is None:
        return None

    access_token = session.get(ACCESS_TOKEN_KEY)
    if not access_token:
        return None

    bridge = AuthBridge.from_settings()
    try:
        return bridge.get_user(access_token)
    except AuthBridgeError as exc:
        if not exc.is_unauthorized:
            logger.warning("Could not verify session: %s", exc)
            return None

    # The access token expired; try once with the refresh token.
    refresh_token = session.get(REFRESH_TOKEN_KEY)
    if not refresh_token:
        return None
    try:
        payload = bridge.refresh_session(refresh_token)
        user = bridge.get_user(payload['access_token'])
    except AuthBridgeError as exc:
        logger.warning("Could not refresh session: %s", exc)
        session.pop(ACCESS_TOKEN_KEY, None)
        session.pop(REFRESH_TOKEN_KEY, None)
        return None

    _save_tokens(session, payload)
    return user


def _save_tokens(session, payload: Dict) -> None:
    session[ACCESS_TOKEN_KEY] = payload['access_token']
    if payload.get('refresh_token'):
        session[REFRESH_TOKEN_KEY] = payload['refresh_token']


def store_session(request, payload: Dict) -> None:
    """Persist a freshly issued session and rotate the session key."""
    request.session.cycle_key()
    _save_tokens(request.session, payload)
    request.session.pop(CODE_VERIFIER_KEY, None)
    if hasattr(request, _REQUEST_CACHE_ATTR):
        delattr(request, _REQUEST_CACHE_ATTR)


def clear_session(request) -> Optional[str]:
    """
    Drop the stored session.

    Returns the access token that was stored, if any.
    """
    access_token = request.session.get(ACCESS_TOKEN_KEY)
    request.session.flush()
    setattr(request, _REQUEST_CACHE_ATTR, None)
    return access_token
