"""Error taxonomy for calls made through the API gateway client."""

import functools
import logging
from typing import Optional

log = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class. `operation` is filled in by the resource client that made the call."""

    def __init__(self, message: str, status: Optional[int] = None, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.operation = operation


class NetworkError(ApiError):
    """Timeout or connection failure; no response was received."""


class AuthenticationError(ApiError):
    """HTTP 401. The stored session has already been cleared."""


class AuthorizationError(ApiError):
    """HTTP 403. No session state is touched."""


class DomainError(ApiError):
    """Any other non-success status; `message` is the server's text."""


def tagged(operation: str):
    """Decorator: stamp any ApiError escaping the call with the operation name, then re-raise."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ApiError as e:
                e.operation = operation
                log.error(f"{operation} failed: {e.message}")
                raise
        return wrapper
    return decorator
