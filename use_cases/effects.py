"""Top-level interpretation of API errors: user-facing message plus optional navigation."""

import logging
from dataclasses import dataclass
from typing import Optional

from infrastructure.http.errors import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    NetworkError,
)

log = logging.getLogger(__name__)

LOGIN_PATH = "/login"

NETWORK_MESSAGE = "The server could not be reached. Please try again in a moment."
SESSION_EXPIRED_MESSAGE = "Your session has expired. Please log in again."
FORBIDDEN_MESSAGE = "You do not have permission for this action."


@dataclass(frozen=True)
class NavigationCommand:
    path: str
    hard: bool = True


@dataclass(frozen=True)
class ErrorEffect:
    message: str
    navigation: Optional[NavigationCommand] = None


def handle_api_error(exc: ApiError) -> ErrorEffect:
    """Only authentication errors navigate; everything else stays local to the caller."""
    if isinstance(exc, AuthenticationError):
        log.info(f"Authentication error in {exc.operation or 'request'}, redirecting to {LOGIN_PATH}")
        return ErrorEffect(SESSION_EXPIRED_MESSAGE, NavigationCommand(LOGIN_PATH))
    if isinstance(exc, AuthorizationError):
        return ErrorEffect(FORBIDDEN_MESSAGE)
    if isinstance(exc, NetworkError):
        return ErrorEffect(NETWORK_MESSAGE)
    return ErrorEffect(exc.message or "Request failed.")
