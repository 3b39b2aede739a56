import json

import httpx
from django.test import SimpleTestCase

from .client import JobBoardAPIError, JobBoardClient


def job(job_id, title="Backend Developer", likes=None):
    return {"id": job_id, "title": title, "likes": likes or []}


class FakeApi:
    """Records requests and answers them from a route table."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        status, body = self.routes[(request.method, request.url.path)]
        return httpx.Response(status, json=body)


class JobBoardClientTests(SimpleTestCase):
    def make_client(self, routes, **kwargs):
        api = FakeApi(routes)
        client = JobBoardClient("http://testserver/", transport=httpx.MockTransport(api), **kwargs)
        self.addCleanup(client.close)
        return client, api

    def test_login_stores_session_and_sends_bearer_header(self):
        user = {"id": 1, "name": "Rita", "role": "recruiter"}
        client, api = self.make_client({
            ("POST", "/api/v1/auth/login"): (200, {"success": True, "user": user, "token": "tok"}),
            ("GET", "/api/v1/auth/me"): (200, {"success": True, "user": user}),
        })

        self.assertEqual(client.login("rita@example.com", "secret1"), user)
        self.assertEqual(client.token, "tok")
        self.assertNotIn("authorization", api.requests[0].headers)
        self.assertEqual(json.loads(api.requests[0].content), {"email": "rita@example.com", "password": "secret1"})

        client.get_current_user()
        self.assertEqual(api.requests[1].headers["authorization"], "Bearer tok")

    def test_logout_forgets_session(self):
        client, _ = self.make_client({}, token="tok")
        client.user = {"id": 1}
        client.user_jobs = [job(1)]
        client.logout()
        self.assertIsNone(client.token)
        self.assertIsNone(client.user)
        self.assertEqual(client.user_jobs, [])

    def test_error_response_raises(self):
        client, _ = self.make_client({
            ("POST", "/api/v1/jobs"): (403, {"success": False, "message": "Not authorized as jobseeker"}),
        }, token="tok")
        with self.assertRaises(JobBoardAPIError) as ctx:
            client.create_job(title="x")
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.message, "Not authorized as jobseeker")

    def test_validation_error_carries_field(self):
        client, _ = self.make_client({
            ("POST", "/api/v1/auth/register"): (400, {"success": False, "message": "Please provide a name", "field": "name"}),
        })
        with self.assertRaises(JobBoardAPIError) as ctx:
            client.register("", "x@example.com", "secret1")
        self.assertEqual(ctx.exception.field, "name")
        self.assertIsNone(client.token)

    def test_create_and_delete_patch_both_caches(self):
        client, _ = self.make_client({
            ("GET", "/api/v1/jobs"): (200, {"success": True, "count": 1, "jobs": [job(1)]}),
            ("GET", "/api/v1/jobs/user/myjobs"): (200, {"success": True, "count": 1, "jobs": [job(1)]}),
            ("POST", "/api/v1/jobs"): (201, {"success": True, "job": job(2, "New Role")}),
            ("DELETE", "/api/v1/jobs/1"): (200, {"success": True, "message": "Job deleted successfully"}),
        }, token="tok")
        client.get_jobs()
        client.get_user_jobs()

        client.create_job(title="New Role")
        self.assertEqual([j["id"] for j in client.jobs], [2, 1])
        self.assertEqual([j["id"] for j in client.user_jobs], [2, 1])

        self.assertEqual(client.delete_job(1), "Job deleted successfully")
        self.assertEqual([j["id"] for j in client.jobs], [2])
        self.assertEqual([j["id"] for j in client.user_jobs], [2])

    def test_like_updates_cached_job(self):
        client, _ = self.make_client({
            ("GET", "/api/v1/jobs"): (200, {"success": True, "count": 1, "jobs": [job(1)]}),
            ("PUT", "/api/v1/jobs/1/like"): (200, {"success": True, "liked": True, "job": job(1, likes=[5])}),
        }, token="tok")
        client.get_jobs()
        updated, liked = client.like_job(1)
        self.assertTrue(liked)
        self.assertEqual(client.jobs[0]["likes"], [5])
        self.assertEqual(updated["likes"], [5])

    def test_search_joins_tags(self):
        client, api = self.make_client({
            ("GET", "/api/v1/jobs/search"): (200, {"success": True, "count": 0, "jobs": []}),
        })
        client.search_jobs(tags=["python", "django"], location="Remote")
        params = api.requests[0].url.params
        self.assertEqual(params["tags"], "python,django")
        self.assertEqual(params["location"], "Remote")
        self.assertNotIn("title", params)

    def test_apply_sends_multipart_put(self):
        application = {"id": 3, "jobId": 1, "status": "pending"}
        client, api = self.make_client({
            ("PUT", "/api/v1/jobs/1/apply"): (200, {"success": True, "application": application}),
        }, token="tok")
        result = client.apply_to_job(1, ("cv.pdf", b"%PDF", "application/pdf"), "555-0101", "Hi")
        self.assertEqual(result, application)

        request = api.requests[0]
        self.assertTrue(request.headers["content-type"].startswith("multipart/form-data"))
        body = request.content
        self.assertIn(b'name="phoneNumber"', body)
        self.assertIn(b'name="coverLetter"', body)
        self.assertIn(b'filename="cv.pdf"', body)

    def test_applicant_tracking(self):
        client, api = self.make_client({
            ("GET", "/api/v1/jobs/1/applicants"): (
                200,
                {"success": True, "jobId": 1, "jobTitle": "Backend", "count": 0, "applications": []},
            ),
            ("PUT", "/api/v1/jobs/1/applicants"): (
                200,
                {"success": True, "message": "ok", "application": {"id": 3, "status": "hired"}},
            ),
        }, token="tok")
        self.assertEqual(client.get_applicants(1)["jobTitle"], "Backend")
        self.assertEqual(client.update_application_status(1, 3, "hired")["status"], "hired")
        self.assertEqual(json.loads(api.requests[1].content), {"applicationId": 3, "status": "hired"})
