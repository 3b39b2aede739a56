import logging

from django.core.exceptions import PermissionDenied, SuspiciousOperation
from django.http import Http404, JsonResponse

from .errors import ApiError, InternalFailure

logger = logging.getLogger(__name__)


class ApiErrorMiddleware:
    """Render ``ApiError`` as JSON and hide unexpected errors behind a 500.

    Exceptions Django already maps to 400, 403 or 404 are left to its handlers.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        identity = getattr(request, "identity", None)
        user_id = identity.user_id if identity else None

        if isinstance(exception, ApiError):
            log = logger.warning if exception.status_code >= 500 else logger.info
            log(
                "Request rejected: method=%s path=%s user_id=%s status=%s message=%s",
                request.method,
                request.path,
                user_id,
                exception.status_code,
                exception.message,
            )
            return JsonResponse(exception.as_dict(), status=exception.status_code)

        if isinstance(exception, (SuspiciousOperation, PermissionDenied, Http404)):
            return None

        logger.exception(
            "Unhandled error: method=%s path=%s user_id=%s",
            request.method,
            request.path,
            user_id,
        )
        failure = InternalFailure()
        return JsonResponse(failure.as_dict(), status=failure.status_code)
