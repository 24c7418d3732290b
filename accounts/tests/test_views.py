from unittest import mock
from urllib.parse import parse_qs, urlsplit

from django.test import SimpleTestCase, TestCase, override_settings

from accounts.bridge import AuthBridgeError, BridgeUser
from accounts.session import ACCESS_TOKEN_KEY, CODE_VERIFIER_KEY, REFRESH_TOKEN_KEY
from accounts.views import MAGIC_LINK_FAILED, MAGIC_LINK_SENT, OAUTH_FAILED, safe_next_path

SESSION_PAYLOAD = {
    "access_token": "new-access",
    "refresh_token": "new-refresh",
    "user": {"id": "3f1d9a52-7c1e-4bb8-9a62-1c2b0d6e4f77", "email": "a@example.com"},
}


class SafeNextPathTests(SimpleTestCase):

    def test_keeps_local_paths(self) -> None:
        self.assertEqual(safe_next_path("/app/jobs/"), "/app/jobs/")

    def test_rejects_everything_else(self) -> None:
        for value in (None, "", "app", "https://evil.example/", "//evil.example/app"):
            with self.subTest(value=value):
                self.assertEqual(safe_next_path(value), "/app/")


@override_settings(SUPABASE_URL="https://auth.example.test", SUPABASE_ANON_KEY="anon")
class LoginViewTests(TestCase):

    def test_login_page_renders_with_error_marker(self) -> None:
        response = self.client.get("/login/", {"error": "auth_callback_failed"})

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Authentication failed. Please try again.")
        self.assertEqual(response.context["next_path"], "/app/")

    @mock.patch("accounts.views.AuthBridge.sign_in_with_otp")
    def test_magic_link_sent(self, mock_otp) -> None:
        response = self.client.post(
            "/login/", {"email": "a@example.com", "next": "/app/jobs/"}, follow=True
        )

        self.assertContains(response, MAGIC_LINK_SENT)
        mock_otp.assert_called_once()
        args, kwargs = mock_otp.call_args
        self.assertEqual(args[0], "a@example.com")
        callback = urlsplit(kwargs["redirect_to"])
        self.assertEqual(callback.path, "/auth/callback/")
        self.assertEqual(parse_qs(callback.query), {"next": ["/app/jobs/"]})
        self.assertTrue(kwargs["code_challenge"])
        self.assertIn(CODE_VERIFIER_KEY, self.client.session)

    @mock.patch("accounts.views.AuthBridge.sign_in_with_otp")
    def test_magic_link_failure_shows_generic_message(self, mock_otp) -> None:
        mock_otp.side_effect = AuthBridgeError("rate limited", status_code=429)

        response = self.client.post("/login/", {"email": "a@example.com"})

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, MAGIC_LINK_FAILED)

    @mock.patch("accounts.views.AuthBridge.sign_in_with_otp")
    def test_invalid_email_does_not_call_auth_api(self, mock_otp) -> None:
        response = self.client.post("/login/", {"email": "not-an-email"})

        self.assertEqual(response.status_code, 200)
        mock_otp.assert_not_called()

    def test_google_login_redirects_to_provider(self) -> None:
        response = self.client.get("/login/google/", {"next": "/app/"})

        self.assertEqual(response.status_code, 302)
        location = urlsplit(response.url)
        self.assertEqual(location.netloc, "auth.example.test")
        self.assertEqual(location.path, "/auth/v1/authorize")
        query = parse_qs(location.query)
        self.assertEqual(query["provider"], ["google"])
        self.assertEqual(query["code_challenge_method"], ["s256"])

    @override_settings(SUPABASE_URL="")
    def test_google_login_failure_returns_to_login(self) -> None:
        response = self.client.get("/login/google/", follow=True)

        self.assertContains(response, OAUTH_FAILED)


class AuthCallbackTests(TestCase):

    def _start_sign_in(self) -> None:
        session = self.client.session
        session[CODE_VERIFIER_KEY] = "verifier"
        session.save()

    @mock.patch("accounts.views.AuthBridge.exchange_code_for_session")
    def test_successful_exchange_stores_session_and_redirects(self, mock_exchange) -> None:
        mock_exchange.return_value = SESSION_PAYLOAD
        self._start_sign_in()

        response = self.client.get("/auth/callback/", {"code": "abc", "next": "/app/jobs/"})

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/app/jobs/")
        mock_exchange.assert_called_once_with("abc", "verifier")
        session = self.client.session
        self.assertEqual(session[ACCESS_TOKEN_KEY], "new-access")
        self.assertEqual(session[REFRESH_TOKEN_KEY], "new-refresh")
        self.assertNotIn(CODE_VERIFIER_KEY, session)

    @mock.patch("accounts.views.AuthBridge.exchange_code_for_session")
    def test_offsite_next_falls_back_to_app(self, mock_exchange) -> None:
        mock_exchange.return_value = SESSION_PAYLOAD
        self._start_sign_in()

        response = self.client.get("/auth/callback/", {"code": "abc", "next": "https://evil.example/"})

        self.assertEqual(response.url, "/app/")

    @mock.patch("accounts.views.AuthBridge.exchange_code_for_session")
    def test_failed_exchange_redirects_with_error(self, mock_exchange) -> None:
        mock_exchange.side_effect = AuthBridgeError("bad code", status_code=400)
        self._start_sign_in()

        response = self.client.get("/auth/callback/", {"code": "abc"})

        self.assertEqual(response.url, "/login/?error=auth_callback_failed")
        self.assertNotIn(ACCESS_TOKEN_KEY, self.client.session)

    def test_missing_code_redirects_with_error(self) -> None:
        response = self.client.get("/auth/callback/")

        self.assertEqual(response.url, "/login/?error=auth_callback_failed")


class LogoutViewTests(TestCase):

    @mock.patch("accounts.views.AuthBridge.sign_out")
    @mock.patch("accounts.session.AuthBridge.get_user")
    def test_logout_clears_session(self, mock_get_user, mock_sign_out) -> None:
        mock_get_user.return_value = BridgeUser(id=SESSION_PAYLOAD["user"]["id"])
        session = self.client.session
        session[ACCESS_TOKEN_KEY] = "access"
        session.save()

        response = self.client.post("/logout/")

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/login/")
        mock_sign_out.assert_called_once_with("access")
        self.assertNotIn(ACCESS_TOKEN_KEY, self.client.session)

        # With the session gone the app is gated again.
        response = self.client.get("/app/")
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith("/login/"))
