"""Session lifecycle: restore on startup, login, logout."""

import logging
from dataclasses import replace
from typing import Callable, Optional

from infrastructure.http.errors import ApiError, NetworkError
from services import auth_service
from use_cases.session_models import (
    Session,
    initial_session,
    profile_from_dict,
    profile_from_login_payload,
)

log = logging.getLogger(__name__)

ROOT_PATH = "/"


class LoginError(Exception):
    """Login failed; the message is meant for display."""


class SessionController:
    """
    Single owner of the in-memory Session.

    `navigate` performs a hard navigation (all per-tab view state is dropped). It is
    injected so the controller stays free of UI concerns.
    """

    def __init__(self, session_store, api_client, navigate: Optional[Callable[[str], None]] = None):
        self.session_store = session_store
        self.api_client = api_client
        self.navigate = navigate
        self._session = initial_session()

    @property
    def session(self) -> Session:
        return self._session

    def restore(self) -> Session:
        try:
            token = self.session_store.get_token()
            user_data = self.session_store.get_user_data()
            user = None
            if token and user_data:
                try:
                    user = profile_from_dict(user_data)
                except (KeyError, TypeError, ValueError) as e:
                    log.warning(f"Stored user data is unusable, ignoring it: {e}")

            if user is not None:
                log.info(f"Session restored for {user.username}")
                self._session = self._session.with_credentials(user, token)
            else:
                log.info("No active session found")
                self._session = self._session.cleared()
        finally:
            self._session = replace(self._session, loading=False)
        return self._session

    def login(self, identifier: str, password: str) -> Session:
        log.info(f"Login attempt for {identifier}")
        try:
            payload = auth_service.login(self.api_client, identifier, password)
        except NetworkError as e:
            raise LoginError("Server not reachable. Please try again.") from e
        except ApiError as e:
            raise LoginError(e.message or "Login failed") from e

        if not isinstance(payload, dict) or not payload.get("token"):
            raise LoginError("Login failed: the server sent no token")
        try:
            user = profile_from_login_payload(payload)
        except (TypeError, ValueError) as e:
            raise LoginError(f"Login failed: {e}") from e

        token = str(payload["token"])
        self.session_store.save(token, user.to_dict())
        self._session = self._session.with_credentials(user, token)
        log.info(f"✅ Login successful for {user.username} ({user.role})")
        return self._session

    def logout(self) -> Session:
        log.info("Logout, clearing stored session")
        self.session_store.clear()
        self._session = self._session.cleared()
        if self.navigate is not None:
            self.navigate(ROOT_PATH)
        return self._session

    def sync_with_store(self) -> Session:
        """Drop in-memory credentials the store no longer holds (cleared by a 401)."""
        if self._session.authenticated and self.session_store.get_token() is None:
            log.info("Stored session was cleared elsewhere, dropping in-memory credentials")
            self._session = self._session.cleared()
        return self._session
