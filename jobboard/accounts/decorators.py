from functools import wraps

from jobboard_api.errors import AuthenticationFailure, AuthorizationFailure


def token_required(view_func):
    """Reject the request unless a valid bearer token identified the caller."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if getattr(request, "identity", None) is None:
            raise getattr(request, "auth_error", None) or AuthenticationFailure()
        # disabled or deleted accounts lose access even with an unexpired token
        request.identity.get_user()
        return view_func(request, *args, **kwargs)
    return _wrapped


def role_required(*roles: str):
    """Ensure the token identity has one of the given roles."""
    def decorator(view_func):
        @token_required
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if request.identity.role not in roles:
                raise AuthorizationFailure(f"Not authorized as {request.identity.role}")
            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator
