"""Small helpers shared by the JSON views."""

from __future__ import annotations

import json
from functools import wraps
from typing import Any

from django.http import JsonResponse
from django.http.multipartparser import MultiPartParserError
from django.utils.datastructures import MultiValueDict
from django.views.decorators.csrf import csrf_exempt

from .errors import ValidationFailure


def api_view(*methods: str):
    """Restrict a view to ``methods`` and answer anything else with a JSON 405.

    CSRF checks are skipped; callers authenticate with bearer tokens.
    """
    allowed = [m.upper() for m in methods]

    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if request.method not in allowed:
                response = JsonResponse(
                    {"success": False, "message": f"Method {request.method} not allowed"},
                    status=405,
                )
                response["Allow"] = ", ".join(allowed)
                return response
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator


def ok(payload: dict[str, Any] | None = None, *, status: int = 200) -> JsonResponse:
    body = {"success": True}
    body.update(payload or {})
    return JsonResponse(body, status=status)


def parse_json(request) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (TypeError, ValueError):
        raise ValidationFailure("Malformed JSON body")
    if not isinstance(data, dict):
        raise ValidationFailure("JSON body must be an object")
    return data


def parse_form_data(request) -> tuple[dict[str, Any], MultiValueDict]:
    """Return ``(data, files)`` for POST, PUT or PATCH requests.

    Django only parses multipart bodies for POST, so other methods are parsed
    here explicitly. JSON bodies are accepted too and carry no files.
    """
    content_type = request.content_type or ""
    if content_type.startswith("multipart/form-data"):
        try:
            if request.method == "POST":
                post, files = request.POST, request.FILES
            else:
                post, files = request.parse_file_upload(request.META, request)
        except MultiPartParserError:
            raise ValidationFailure("Malformed multipart body")
        return post.dict(), files
    if content_type == "application/x-www-form-urlencoded" and request.method == "POST":
        return request.POST.dict(), MultiValueDict()
    return parse_json(request), MultiValueDict()
