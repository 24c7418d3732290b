import uuid
from unittest import mock

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.bridge import BridgeUser
from jobs.models import Job
from rolepilot.revalidate import page_version


class JobApiTests(TestCase):
    """Bearer-token API over the caller's jobs."""

    def setUp(self) -> None:
        self.user = BridgeUser(id=str(uuid.uuid4()))
        patcher = mock.patch(
            "accounts.authentication.AuthBridge.get_user", return_value=self.user
        )
        patcher.start()
        self.addCleanup(patcher.stop)

        self.client = APIClient()
        self.client.credentials(HTTP_AUTHORIZATION="Bearer access-token")

    def test_requires_token(self) -> None:
        response = APIClient().get("/api/jobs/")

        self.assertEqual(response.status_code, 401)

    def test_list_only_returns_own_jobs(self) -> None:
        Job.objects.create(user_id=self.user.id, company="Mine", role_title="Engineer")
        Job.objects.create(user_id=uuid.uuid4(), company="Theirs", role_title="Engineer")

        response = self.client.get("/api/jobs/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([job["company"] for job in response.data], ["Mine"])

    def test_create_defaults_unknown_status_and_ignores_owner(self) -> None:
        other_owner = str(uuid.uuid4())

        response = self.client.post(
            "/api/jobs/",
            {
                "company": "Acme",
                "role_title": "Engineer",
                "status": "bogus",
                "location": "  ",
                "user_id": other_owner,
            },
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["status"], "saved")
        self.assertIsNone(response.data["location"])
        job = Job.objects.get()
        self.assertEqual(str(job.user_id), self.user.id)

    def test_padded_status_is_not_an_exact_match(self) -> None:
        response = self.client.post(
            "/api/jobs/",
            {"company": "Acme", "role_title": "Engineer", "status": " applied "},
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["status"], "saved")

    def test_create_requires_company_and_role(self) -> None:
        response = self.client.post("/api/jobs/", {"company": "  "}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("company", response.data)
        self.assertIn("role_title", response.data)

    def test_update_and_delete_are_owner_scoped(self) -> None:
        theirs = Job.objects.create(user_id=uuid.uuid4(), company="Theirs", role_title="Engineer")

        self.assertEqual(
            self.client.patch(f"/api/jobs/{theirs.id}/", {"company": "X"}, format="json").status_code,
            404,
        )
        self.assertEqual(self.client.delete(f"/api/jobs/{theirs.id}/").status_code, 404)
        self.assertTrue(Job.objects.filter(id=theirs.id, company="Theirs").exists())

    def test_update_own_job_refreshes_app_page(self) -> None:
        job = Job.objects.create(user_id=self.user.id, company="Acme", role_title="Engineer")
        version = page_version("/app/", self.user.id)

        response = self.client.patch(
            f"/api/jobs/{job.id}/", {"status": "offer", "archived": True}, format="json"
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "offer")
        self.assertTrue(response.data["archived"])
        self.assertNotEqual(page_version("/app/", self.user.id), version)
