import logging
from typing import Any, Optional

import requests

from infrastructure.http.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NetworkError,
)

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


def _server_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        msg = body.get("error") or body.get("message")
        if msg:
            return str(msg)
    text = (resp.text or "").strip()
    return text or f"HTTP {resp.status_code}"


def _parse_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class ApiClient:
    """
    Single HTTP gateway to the CINEBASE REST backend.

    Every request carries the stored bearer token when one exists. A 401 from any
    endpoint clears the session store and raises AuthenticationError; callers hand
    that to the top-level effect handler, which owns navigation.
    """

    def __init__(self, base_url: str, session_store, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.timeout = timeout
        self.http = requests.Session()
        self.http.headers.update({"Content-Type": "application/json"})

    def _auth_headers(self) -> dict:
        token = self.session_store.get_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def _inspect(self, resp: requests.Response, method: str, path: str) -> Any:
        status = resp.status_code
        if 200 <= status < 300:
            return _parse_body(resp)

        message = _server_message(resp)
        if status == 401:
            log.warning(f"🚪 {method} {path} returned 401, clearing stored session")
            self.session_store.clear()
            raise AuthenticationError(message, status=status)
        if status == 403:
            log.error(f"⛔ {method} {path} returned 403, no permission for this action")
            raise AuthorizationError(message, status=status)

        log.error(f"❌ {method} {path} failed: HTTP {status} {message}")
        raise DomainError(message, status=status)

    def request(self, method: str, path: str, json: Optional[Any] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            resp = self.http.request(
                method,
                url,
                json=json,
                headers=self._auth_headers(),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            log.error(f"❌ {method} {path} timed out after {self.timeout}s")
            raise NetworkError(f"Request timed out after {self.timeout:g}s") from e
        except requests.RequestException as e:
            log.error(f"❌ Network error on {method} {path}: {e}")
            raise NetworkError(f"Network error: {e}") from e

        return self._inspect(resp, method, path)

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, payload: Any) -> Any:
        return self.request("POST", path, json=payload)

    def put(self, path: str, payload: Any) -> Any:
        return self.request("PUT", path, json=payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
