import logging
import time
from functools import wraps

from jobboard_api.errors import ApiError

logger = logging.getLogger(__name__)


def _caller_id(args, kwargs):
    identity = kwargs.get("identity")
    if identity is None and args:
        identity = args[0]
    return getattr(identity, "user_id", None)


def logged_operation(name: str):
    """Log the outcome and duration of a lifecycle operation.

    Rejections (``ApiError``) are expected traffic and logged at INFO; anything
    else is logged at WARNING and re-raised for the error middleware, which
    records the traceback.
    """
    def decorator(func):
        @wraps(func)
        def _wrapped(*args, **kwargs):
            started = time.monotonic()
            user_id = _caller_id(args, kwargs)
            try:
                result = func(*args, **kwargs)
            except ApiError as exc:
                logger.info(
                    "%s rejected: user_id=%s status=%s message=%s",
                    name,
                    user_id,
                    exc.status_code,
                    exc.message,
                )
                raise
            except Exception as exc:
                logger.warning("%s failed: user_id=%s error=%s", name, user_id, exc.__class__.__name__)
                raise
            logger.info(
                "%s ok: user_id=%s duration_ms=%.1f",
                name,
                user_id,
                (time.monotonic() - started) * 1000,
            )
            return result

        return _wrapped

    return decorator
