import os

import streamlit as st
from streamlit.errors import StreamlitAPIException

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_REQUEST_TIMEOUT = 10
DEFAULT_SESSION_DB = "cinebase_session.db"

CLIENT_COOKIE = "cinebase_client"


def get_secret(key):
    try:
        return st.secrets.get(key)
    except (FileNotFoundError, StreamlitAPIException):
        return None


def get_setting(key, default=None):
    value = get_secret(key) or os.getenv(key)
    return value if value not in (None, "") else default


def api_base_url() -> str:
    return str(get_setting("API_BASE_URL", DEFAULT_API_BASE_URL)).rstrip("/")


def request_timeout() -> float:
    raw = get_setting("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
    try:
        return float(raw)
    except (TypeError, ValueError):
        return float(DEFAULT_REQUEST_TIMEOUT)


def session_db_path() -> str:
    return str(get_setting("SESSION_DB", DEFAULT_SESSION_DB))
