import json
import logging
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
USER_DATA_KEY = "userData"


class SessionStore:
    """Browser-scoped persistence of the bearer token and cached user profile."""

    def __init__(self, repository, namespace: str):
        self.repository = repository
        self.namespace = namespace

    def get_token(self) -> Optional[str]:
        token = self.repository.get(self.namespace, TOKEN_KEY)
        return token or None

    def get_user_data(self) -> Optional[Dict[str, Any]]:
        raw = self.repository.get(self.namespace, USER_DATA_KEY)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            log.warning(f"Discarding unreadable user data for client {self.namespace}")
            return None
        return data if isinstance(data, dict) else None

    def save(self, token: str, user_data: Dict[str, Any]):
        self.repository.set_many(self.namespace, {
            TOKEN_KEY: token,
            USER_DATA_KEY: json.dumps(user_data),
        })

    def clear(self):
        self.repository.delete(self.namespace, TOKEN_KEY, USER_DATA_KEY)

    def is_empty(self) -> bool:
        return self.get_token() is None and self.get_user_data() is None
