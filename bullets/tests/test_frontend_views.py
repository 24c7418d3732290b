import uuid
from unittest import mock

from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.db import DatabaseError
from django.test import RequestFactory, TestCase, override_settings
from django.urls import reverse

from accounts.bridge import BridgeUser
from bullets.frontend_views import bullet_create, bullet_delete, bullet_update
from bullets.models import Bullet
from rolepilot.mutations import STORE_ERROR_MESSAGE


@override_settings(
    SESSION_ENGINE='django.contrib.sessions.backends.cache',
    CACHES={
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        }
    },
)
class BulletFrontendViewsTests(TestCase):
    """Bullet bank form posts, called directly with a resolved user."""

    def setUp(self) -> None:
        self.factory = RequestFactory()
        self.user = BridgeUser(id=str(uuid.uuid4()), email="owner@example.com")

    def _build_request(self, name: str, data: dict):
        request = self.factory.post(reverse(name), data)

        session_middleware = SessionMiddleware(lambda r: None)
        session_middleware.process_request(request)
        request.session.save()

        MessageMiddleware(lambda r: None).process_request(request)
        return request

    @mock.patch("bullets.frontend_views.get_current_user")
    def test_bullet_create_redirects_to_app(self, mock_user) -> None:
        mock_user.return_value = self.user
        request = self._build_request(
            "bullet_create",
            {"bullet": "Cut p95 latency by 60%", "skills": "Python, Postgres"},
        )

        response = bullet_create(request)

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/app/")
        bullet = Bullet.objects.get()
        self.assertEqual(bullet.category, "general")
        self.assertEqual(bullet.skills, ["Python", "Postgres"])
        self.assertEqual(str(bullet.user_id), self.user.id)
        self.assertEqual(list(request._messages), [])

    @mock.patch("bullets.frontend_views.get_current_user")
    def test_bullet_create_without_user_is_silent(self, mock_user) -> None:
        mock_user.return_value = None
        request = self._build_request("bullet_create", {"bullet": "Shipped search"})

        response = bullet_create(request)

        self.assertEqual(response.status_code, 302)
        self.assertFalse(Bullet.objects.exists())
        self.assertEqual(list(request._messages), [])

    @mock.patch("bullets.frontend_views.get_current_user")
    def test_bullet_update_for_other_owner_is_silent(self, mock_user) -> None:
        mock_user.return_value = self.user
        bullet = Bullet.objects.create(user_id=uuid.uuid4(), bullet="Their win")
        request = self._build_request(
            "bullet_update",
            {"id": str(bullet.id), "bullet": "Mine now", "category": "leadership"},
        )

        response = bullet_update(request)

        self.assertEqual(response.status_code, 302)
        bullet.refresh_from_db()
        self.assertEqual(bullet.bullet, "Their win")
        self.assertEqual(bullet.category, "general")
        self.assertEqual(list(request._messages), [])

    @mock.patch("bullets.frontend_views.get_current_user")
    def test_bullet_delete_for_other_owner_keeps_row(self, mock_user) -> None:
        mock_user.return_value = self.user
        bullet = Bullet.objects.create(user_id=uuid.uuid4(), bullet="Their win")
        request = self._build_request("bullet_delete", {"id": str(bullet.id)})

        response = bullet_delete(request)

        self.assertEqual(response.status_code, 302)
        self.assertTrue(Bullet.objects.filter(id=bullet.id).exists())
        self.assertEqual(list(request._messages), [])

    @mock.patch("bullets.frontend_views.get_current_user")
    @mock.patch("bullets.services.Bullet.objects.delete_owned")
    def test_bullet_delete_store_error_flashes_generic_message(self, mock_delete, mock_user) -> None:
        mock_user.return_value = self.user
        mock_delete.side_effect = DatabaseError("relation \"bullet_bank\" does not exist")
        request = self._build_request("bullet_delete", {"id": str(uuid.uuid4())})

        response = bullet_delete(request)

        self.assertEqual(response.status_code, 302)
        messages = [str(message) for message in request._messages]
        self.assertEqual(messages, [STORE_ERROR_MESSAGE])

    def test_bullet_update_rejects_get(self) -> None:
        request = self.factory.get(reverse("bullet_update"))

        response = bullet_update(request)

        self.assertEqual(response.status_code, 405)
