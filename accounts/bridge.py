"""
Client for the hosted auth API.

Sign-in, sessions and user identity are owned by a GoTrue-compatible service
(Supabase Auth). This module speaks its REST API over `requests`; callers
only ever see `BridgeUser`, session payload dicts, and `AuthBridgeError`.
"""
import base64
import hashlib
import logging
import secrets
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlencode

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class AuthBridgeError(Exception):
    """Raised when the auth API cannot be reached or rejects a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code in (401, 403)


@dataclass(frozen=True)
class BridgeUser:
    """
    Identity of a signed-in user as reported by the auth API.

    Quacks like a Django user where views and DRF permissions look at
    `is_authenticated`.
    """

    id: str
    email: str = ''

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False

    @classmethod
    def from_payload(cls, payload: Dict) -> 'BridgeUser':
        user_id = payload.get('id') if isinstance(payload, dict) else None
        if not user_id:
            raise AuthBridgeError("Auth API returned a user without an id")
        return cls(id=str(user_id), email=payload.get('email') or '')


def generate_code_verifier() -> str:
    """Random PKCE verifier (RFC 7636, 43-128 unreserved characters)."""
    return secrets.token_urlsafe(64)


def code_challenge_for(verifier: str) -> str:
    digest = hashlib.sha256(verifier.encode('ascii')).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b'=').decode('ascii')


class AuthBridge:
    """
    Thin wrapper over the auth API endpoints the app uses.

    Usage:
        bridge = AuthBridge.from_settings()
        user = bridge.get_user(access_token)
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 10.0,
                 http: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.http = http or requests.Session()

    @classmethod
    def from_settings(cls) -> 'AuthBridge':
        return cls(
            base_url=settings.SUPABASE_URL,
            api_key=settings.SUPABASE_ANON_KEY,
            timeout=settings.SUPABASE_TIMEOUT,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/auth/v1/{path.lstrip('/')}"

    def _headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        headers = {
            'apikey': self.api_key,
            'Content-Type': 'application/json',
        }
        if access_token:
            headers['Authorization'] = f"Bearer {access_token}"
        return headers

    def _request(self, method: str, path: str, *, access_token: Optional[str] = None,
                 params: Optional[Dict] = None, json: Optional[Dict] = None) -> Dict:
        if not self.base_url:
            raise AuthBridgeError("SUPABASE_URL is not configured")

        try:
            response = self.http.request(
                method,
                self._url(path),
                headers=self._headers(access_token),
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise AuthBridgeError(f"Auth API unreachable: {exc}") from exc

        logger.debug("Auth API %s %s -> %s", method, path, response.status_code)
        if response.status_code >= 400:
            raise AuthBridgeError(
                f"Auth API {method} {path} failed with {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise AuthBridgeError(
                f"Auth API {method} {path} returned invalid JSON",
                status_code=response.status_code,
            ) from exc

    def get_user(self, access_token: str) -> BridgeUser:
        """Resolve the user behind an access token."""
        payload = self._request('GET', 'user', access_token=access_token)
        return BridgeUser.from_payload(payload)

    def exchange_code_for_session(self, auth_code: str, code_verifier: str) -> Dict:
        """
        Trade a one-time auth code from the sign-in redirect for a session.

        Returns the session payload with `access_token`, `refresh_token`
        and `user`.
        """
        payload = self._request(
            'POST',
            'token',
            params={'grant_type': 'pkce'},
            json={'auth_code': auth_code, 'code_verifier': code_verifier},
        )
        return self._check_session(payload)

    def refresh_session(self, refresh_token: str) -> Dict:
        payload = self._request(
            'POST',
            'token',
            params={'grant_type': 'refresh_token'},
            json={'refresh_token': refresh_token},
        )
        return self._check_session(payload)

    def sign_in_with_otp(self, email: str, redirect_to: str, code_challenge: str) -> None:
        """Email a one-time sign-in link that lands on `redirect_to`."""
        self._request(
            'POST',
            'otp',
            params={'redirect_to': redirect_to},
            json={
                'email': email,
                'create_user': True,
                'code_challenge': code_challenge,
                'code_challenge_method': 's256',
            },
        )

    def authorize_url(self, provider: str, redirect_to: str, code_challenge: str) -> str:
        """URL that starts an OAuth sign-in with `provider`."""
        if not self.base_url:
            raise AuthBridgeError("SUPABASE_URL is not configured")
        query = urlencode({
            'provider': provider,
            'redirect_to': redirect_to,
            'code_challenge': code_challenge,
            'code_challenge_method': 's256',
        })
        return f"{self._url('authorize')}?{query}"

    def sign_out(self, access_token: str) -> None:
        self._request('POST', 'logout', access_token=access_token)

    @staticmethod
    def _check_session(payload: Dict) -> Dict:
        if not payload.get('access_token'):
            raise AuthBridgeError("Auth API returned a session without an access token")
        return payload
