"""Error taxonomy shared by the API views and the service layer.

Every failure a caller may see is an ``ApiError`` subclass carrying its HTTP
status. ``ApiErrorMiddleware`` turns them into JSON responses. Exceptions
Django maps to 400, 403 or 404 itself pass through; anything else that escapes
a view is reported as an internal failure.
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    status_code = 500
    default_message = "Something went wrong, please try again later"

    def __init__(self, message: str | None = None, *, field: str | None = None):
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        if self.field:
            payload["field"] = self.field
        return payload


class ValidationFailure(ApiError):
    status_code = 400
    default_message = "Invalid request"

    @classmethod
    def from_form(cls, form, field_names: dict[str, str] | None = None) -> "ValidationFailure":
        """Build a failure from the first error of a bound, invalid form.

        ``field_names`` maps form field names to the names used on the wire.
        """
        field_names = field_names or {}
        for name, errors in form.errors.items():
            if not errors:
                continue
            if name == "__all__":
                return cls(str(errors[0]))
            return cls(str(errors[0]), field=field_names.get(name, name))
        return cls()


class AuthenticationFailure(ApiError):
    status_code = 401
    default_message = "Authentication invalid"


class AuthorizationFailure(ApiError):
    status_code = 403
    default_message = "You are not allowed to perform this action"


class NotFound(ApiError):
    status_code = 404
    default_message = "Resource not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Conflicting request"


class InternalFailure(ApiError):
    status_code = 500
