"""Error kinds raised by storefront operations.

Every deliberate failure carries an :class:`ErrorKind`; the HTTP layer maps
the kind to a status code and never looks at the exception class hierarchy.
"""

import functools
from enum import Enum

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ErrorKind(Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}


class StorefrontError(Exception):
    """A failure the storefront signals on purpose, with a client-safe message."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class BadRequest(StorefrontError):
    kind = ErrorKind.BAD_REQUEST


class Unauthorized(StorefrontError):
    kind = ErrorKind.UNAUTHORIZED


class Forbidden(StorefrontError):
    kind = ErrorKind.FORBIDDEN


class NotFound(StorefrontError):
    kind = ErrorKind.NOT_FOUND


class Conflict(StorefrontError):
    kind = ErrorKind.CONFLICT


def flatten_errors(message: str, passthrough: tuple[type[Exception], ...] = ()):
    """Report anything unexpected raised by the wrapped operation as ``BadRequest(message)``.

    ``StorefrontError``s and the exception types listed in ``passthrough`` are
    re-raised unchanged. The flattened cause is logged, never returned.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except StorefrontError:
                raise
            except passthrough:
                raise
            except Exception as exc:
                logger.exception(
                    "operation.failed",
                    operation=func.__name__,
                    error_type=type(exc).__name__,
                    reported_as=message,
                )
                raise BadRequest(message) from exc

        return wrapper

    return decorator
