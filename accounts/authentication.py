"""
Accounts app authentication

DRF authentication using auth API access tokens.
"""
from rest_framework import authentication, exceptions

from .bridge import AuthBridge, AuthBridgeError


class BridgeTokenAuthentication(authentication.BaseAuthentication):
    """
    Authenticate API calls with `Authorization: Bearer <access token>`.

    The token is verified against the auth API on every request.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None

        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid bearer header.')

        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid bearer token.')

        try:
            user = AuthBridge.from_settings().get_user(token)
        except AuthBridgeError:
            raise exceptions.AuthenticationFailed('Invalid or expired access token.')

        return (user, token)

    def authenticate_header(self, request):
        return self.keyword
