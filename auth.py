"""Wiring for the per-browser session objects: store, API gateway, controller."""

import logging

import settings
from infrastructure.http.api_client import ApiClient
from infrastructure.repositories.sqlite_kv_repository import SQLiteKeyValueRepository
from infrastructure.storage.session_store import SessionStore
from use_cases.session_controller import SessionController

log = logging.getLogger(__name__)

_kv_repo = None


def get_kv_repo() -> SQLiteKeyValueRepository:
    global _kv_repo
    db_path = settings.session_db_path()
    if _kv_repo is None or _kv_repo.db_path != db_path:
        _kv_repo = SQLiteKeyValueRepository(db_path)
        _kv_repo.init_db()
        log.info(f"Session store ready at {db_path}")
    return _kv_repo


def build_session_store(client_id: str) -> SessionStore:
    return SessionStore(get_kv_repo(), client_id)


def build_api_client(session_store: SessionStore) -> ApiClient:
    return ApiClient(
        settings.api_base_url(),
        session_store,
        timeout=settings.request_timeout(),
    )


def build_controller(client_id: str, navigate=None) -> SessionController:
    store = build_session_store(client_id)
    return SessionController(store, build_api_client(store), navigate=navigate)
