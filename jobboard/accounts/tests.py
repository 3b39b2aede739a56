import json
from unittest import mock

from django.conf import settings
from django.core import signing
from django.test import RequestFactory, TestCase, override_settings
from django.urls import reverse

from jobboard_api.errors import AuthenticationFailure

from .middleware import BearerTokenMiddleware
from .models import User
from .permissions import can_manage_job, can_post_jobs
from .tokens import Identity, decode_token, issue_token, token_from_header


def auth_header(user):
    return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(user)}"}


class RegisterLoginTests(TestCase):
    def post_json(self, url, payload, **extra):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json", **extra)

    def test_register_returns_user_and_token(self):
        resp = self.post_json(
            reverse("register"),
            {"name": "Alice", "email": "alice@example.com", "password": "secret1", "role": "recruiter"},
        )
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["user"]["email"], "alice@example.com")
        self.assertEqual(data["user"]["role"], "recruiter")
        self.assertEqual(data["user"]["location"], "my city")
        self.assertNotIn("password", data["user"])

        identity = decode_token(data["token"])
        self.assertEqual(identity.user_id, data["user"]["id"])
        self.assertEqual(identity.role, "recruiter")

    def test_register_defaults_to_jobseeker(self):
        resp = self.post_json(reverse("register"), {"name": "Bob", "email": "bob@example.com", "password": "secret1"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["user"]["role"], "jobseeker")

    def test_register_rejects_admin_role(self):
        resp = self.post_json(
            reverse("register"),
            {"name": "Mallory", "email": "m@example.com", "password": "secret1", "role": "admin"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["field"], "role")
        self.assertFalse(User.objects.filter(email="m@example.com").exists())

    def test_register_duplicate_email(self):
        User.objects.create_user(email="dup@example.com", password="secret1", name="First")
        resp = self.post_json(reverse("register"), {"name": "Second", "email": "dup@example.com", "password": "secret1"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Email already in use")

    def test_register_short_password(self):
        resp = self.post_json(reverse("register"), {"name": "Carol", "email": "carol@example.com", "password": "123"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["field"], "password")

    def test_register_missing_name(self):
        resp = self.post_json(reverse("register"), {"email": "x@example.com", "password": "secret1"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Please provide a name")

    def test_register_malformed_json(self):
        resp = self.client.post(reverse("register"), data="{not json", content_type="application/json")
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()["success"])

    def test_login_success_and_failure(self):
        User.objects.create_user(email="dave@example.com", password="secret1", name="Dave")

        ok = self.post_json(reverse("login"), {"email": "dave@example.com", "password": "secret1"})
        self.assertEqual(ok.status_code, 200)
        self.assertIn("token", ok.json())

        bad = self.post_json(reverse("login"), {"email": "dave@example.com", "password": "wrong"})
        self.assertEqual(bad.status_code, 401)
        self.assertEqual(bad.json()["message"], "Invalid credentials")

    def test_login_requires_both_fields(self):
        resp = self.post_json(reverse("login"), {"email": "dave@example.com"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Please provide email and password")

    def test_login_wrong_method(self):
        resp = self.client.get(reverse("login"))
        self.assertEqual(resp.status_code, 405)
        self.assertEqual(resp["Allow"], "POST")


class CurrentUserTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="erin@example.com", password="secret1", name="Erin")

    def test_me_requires_token(self):
        resp = self.client.get(reverse("current_user"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["message"], "Authentication invalid")

    def test_me_rejects_garbage_token(self):
        resp = self.client.get(reverse("current_user"), HTTP_AUTHORIZATION="Bearer not-a-token")
        self.assertEqual(resp.status_code, 401)

    def test_me_rejects_non_bearer_scheme(self):
        resp = self.client.get(reverse("current_user"), HTTP_AUTHORIZATION="Basic abc")
        self.assertEqual(resp.status_code, 401)

    def test_me_returns_profile(self):
        resp = self.client.get(reverse("current_user"), **auth_header(self.user))
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["user"]
        self.assertEqual(user["id"], self.user.pk)
        self.assertEqual(user["savedJobs"], [])
        self.assertEqual(user["appliedJobs"], [])

    def test_token_of_deactivated_user_is_rejected(self):
        headers = auth_header(self.user)
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])
        resp = self.client.get(reverse("current_user"), **headers)
        self.assertEqual(resp.status_code, 401)

    def test_update_profile_merges_fields_and_refreshes_token(self):
        resp = self.client.patch(
            reverse("update_profile"),
            data=json.dumps({"name": "Erin Smith", "email": "erin@example.com", "bio": "Backend engineer"}),
            content_type="application/json",
            **auth_header(self.user),
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["user"]["name"], "Erin Smith")
        self.assertEqual(data["user"]["bio"], "Backend engineer")
        self.assertEqual(data["user"]["location"], "my city")
        self.assertEqual(decode_token(data["token"]).name, "Erin Smith")

    def test_update_profile_requires_name_and_email(self):
        resp = self.client.patch(
            reverse("update_profile"),
            data=json.dumps({"bio": "only a bio"}),
            content_type="application/json",
            **auth_header(self.user),
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Please provide all required values")

    def test_update_profile_cannot_change_role(self):
        self.client.patch(
            reverse("update_profile"),
            data=json.dumps({"name": "Erin", "email": "erin@example.com", "role": "recruiter"}),
            content_type="application/json",
            **auth_header(self.user),
        )
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, User.Role.JOBSEEKER)


class TokenTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            email="frank@example.com", password="secret1", name="Frank", role=User.Role.RECRUITER
        )

    def test_round_trip_claims(self):
        identity = decode_token(issue_token(self.user))
        self.assertEqual(identity, Identity(user_id=self.user.pk, name="Frank", role="recruiter"))

    def test_tampered_token(self):
        token = issue_token(self.user)
        with self.assertRaises(AuthenticationFailure):
            decode_token(token[:-2] + ("aa" if token[-2:] != "aa" else "bb"))

    def test_token_signed_with_other_salt(self):
        token = signing.dumps({"userId": self.user.pk, "name": "Frank", "role": "recruiter"}, salt="other")
        with self.assertRaises(AuthenticationFailure):
            decode_token(token)

    def test_unknown_role_claim(self):
        token = signing.dumps({"userId": self.user.pk, "name": "Frank", "role": "owner"}, salt=settings.AUTH_TOKEN_SALT)
        with self.assertRaises(AuthenticationFailure):
            decode_token(token)

    @override_settings(AUTH_TOKEN_MAX_AGE=60)
    def test_expired_token(self):
        with mock.patch("django.core.signing.time.time", return_value=1_000_000):
            token = issue_token(self.user)
        with mock.patch("django.core.signing.time.time", return_value=1_000_000 + 61):
            with self.assertRaises(AuthenticationFailure):
                decode_token(token)

    def test_token_from_header(self):
        self.assertIsNone(token_from_header(None))
        self.assertEqual(token_from_header("Bearer abc"), "abc")
        self.assertEqual(token_from_header("bearer  abc "), "abc")
        with self.assertRaises(AuthenticationFailure):
            token_from_header("Bearer")
        with self.assertRaises(AuthenticationFailure):
            token_from_header("Token abc")

    def test_middleware_attaches_identity(self):
        request = RequestFactory().get("/", **auth_header(self.user))
        seen = {}

        def get_response(req):
            seen["identity"] = req.identity
            seen["error"] = req.auth_error

        BearerTokenMiddleware(get_response)(request)
        self.assertEqual(seen["identity"].user_id, self.user.pk)
        self.assertIsNone(seen["error"])


class PermissionTests(TestCase):
    def test_only_recruiters_post_jobs(self):
        self.assertTrue(can_post_jobs(Identity(1, "R", "recruiter")))
        self.assertFalse(can_post_jobs(Identity(2, "J", "jobseeker")))
        self.assertFalse(can_post_jobs(Identity(3, "A", "admin")))
        self.assertFalse(can_post_jobs(None))

    def test_manage_job_requires_ownership(self):
        job = mock.Mock(owner_id=7)
        self.assertTrue(can_manage_job(Identity(7, "R", "recruiter"), job))
        self.assertFalse(can_manage_job(Identity(8, "R", "recruiter"), job))
        self.assertFalse(can_manage_job(Identity(9, "A", "admin"), job))
