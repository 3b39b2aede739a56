import json

from django.core.exceptions import PermissionDenied, RequestDataTooBig, SuspiciousOperation
from django.http import Http404
from django.test import RequestFactory, SimpleTestCase

from .errors import Conflict
from .middleware import ApiErrorMiddleware
from .views import bad_request, permission_denied


class ApiErrorMiddlewareTests(SimpleTestCase):
    def setUp(self):
        self.middleware = ApiErrorMiddleware(lambda request: None)
        self.request = RequestFactory().get("/api/v1/jobs")

    def test_api_errors_render_as_json(self):
        resp = self.middleware.process_exception(self.request, Conflict("Taken", field="email"))
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(json.loads(resp.content), {"success": False, "message": "Taken", "field": "email"})

    def test_django_http_errors_are_left_to_django(self):
        for exc in (SuspiciousOperation("bad host"), RequestDataTooBig(), PermissionDenied(), Http404()):
            with self.subTest(exc=type(exc).__name__):
                self.assertIsNone(self.middleware.process_exception(self.request, exc))

    def test_unexpected_errors_are_hidden(self):
        resp = self.middleware.process_exception(self.request, RuntimeError("db down"))
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            json.loads(resp.content),
            {"success": False, "message": "Something went wrong, please try again later"},
        )


class ErrorHandlerViewTests(SimpleTestCase):
    def test_handlers_answer_in_json(self):
        request = RequestFactory().get("/api/v1/jobs")
        for handler, status in ((bad_request, 400), (permission_denied, 403)):
            with self.subTest(status=status):
                resp = handler(request, exception=None)
                self.assertEqual(resp.status_code, status)
                self.assertFalse(json.loads(resp.content)["success"])
