from jobboard_api.errors import AuthenticationFailure

from .tokens import decode_token, token_from_header


class BearerTokenMiddleware:
    """Attach the bearer-token identity (or the reason it was rejected) to each request.

    The middleware never rejects a request itself; views that need an identity
    are wrapped with ``accounts.decorators.token_required``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.identity = None
        request.auth_error = None
        try:
            token = token_from_header(request.headers.get("Authorization"))
            if token is not None:
                request.identity = decode_token(token)
        except AuthenticationFailure as exc:
            request.auth_error = exc
        return self.get_response(request)
