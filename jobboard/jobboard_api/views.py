from django.http import JsonResponse


def _failure(message, status):
    return JsonResponse({"success": False, "message": message}, status=status)


def bad_request(request, exception=None):
    return _failure("Bad request", 400)


def permission_denied(request, exception=None):
    return _failure("You are not allowed to perform this action", 403)


def route_not_found(request, exception=None):
    return _failure(f"Route not found: {request.path}", 404)
