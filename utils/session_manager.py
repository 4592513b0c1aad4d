import logging
import secrets

import streamlit as st
import streamlit.components.v1 as components

import auth
import settings
from use_cases.effects import ErrorEffect

log = logging.getLogger(__name__)

"""
SESSION STATE CONTRACT

Per-tab Streamlit state. Anything not listed in PRESERVED_KEYS is view state and
is dropped on a hard navigation (logout, expired session).

client_id: str
    browser identity, mirrors the cinebase_client cookie; namespace of the session store
    owner: session_manager

session_controller: SessionController
    single owner of the in-memory Session
    owner: session_manager

session_restored: bool
    restore() already ran for this tab
    default: False
    owner: bootstrap

flash_message: str | None
    message shown once after a navigation (e.g. expired session)
    default: None
    owner: session_manager

editing_movie: dict | None
    movie currently open in the admin form
    default: None
    owner: admin_view

confirm_delete_id: int | None
    movie id awaiting delete confirmation
    default: None
    owner: admin_view

review_open_for: int | None
    movie id whose review form is expanded
    default: None
    owner: movies_view
"""

PRESERVED_KEYS = {"client_id"}
PAGE_PARAM = "page"


def init_session_state():
    if "session_restored" not in st.session_state:
        st.session_state.session_restored = False
    if "flash_message" not in st.session_state:
        st.session_state.flash_message = None
    if "editing_movie" not in st.session_state:
        st.session_state.editing_movie = None
    if "confirm_delete_id" not in st.session_state:
        st.session_state.confirm_delete_id = None
    if "review_open_for" not in st.session_state:
        st.session_state.review_open_for = None


def _persist_client_cookie(client_id):
    components.html(
        f"""
        <script>
          var cookieStr = "{settings.CLIENT_COOKIE}={client_id}; path=/; max-age=31536000; SameSite=Lax";
          document.cookie = cookieStr;
          try {{ window.parent.document.cookie = cookieStr; }} catch (e) {{}}
        </script>
        """,
        height=0,
    )


def get_client_id():
    if st.session_state.get("client_id"):
        return st.session_state.client_id

    try:
        client_id = st.context.cookies.get(settings.CLIENT_COOKIE)
    except Exception:
        # No browser context when running headless
        client_id = None

    if not client_id:
        client_id = secrets.token_urlsafe(24)
        _persist_client_cookie(client_id)
        log.info("Issued new client id cookie")

    st.session_state.client_id = client_id
    return client_id


def get_controller():
    if st.session_state.get("session_controller") is None:
        st.session_state.session_controller = auth.build_controller(
            get_client_id(),
            navigate=hard_navigate,
        )
    return st.session_state.session_controller


def get_api_client():
    return get_controller().api_client


def current_session():
    return get_controller().session


def current_path():
    return st.query_params.get(PAGE_PARAM, "/")


def _reset_view_state():
    for key in list(st.session_state.keys()):
        if key not in PRESERVED_KEYS:
            del st.session_state[key]


def navigate(path):
    """Soft navigation: keep view state."""
    st.query_params[PAGE_PARAM] = path
    st.rerun()


def hard_navigate(path):
    """Full reset: the next run rebuilds the controller and restores from storage."""
    _reset_view_state()
    st.query_params[PAGE_PARAM] = path
    st.rerun()


def apply_error_effect(effect: ErrorEffect):
    """Show the message locally, or carry it across the navigation the effect asks for."""
    if effect.navigation is None:
        st.error(effect.message)
        return
    if effect.navigation.hard:
        _reset_view_state()
    st.session_state.flash_message = effect.message
    st.query_params[PAGE_PARAM] = effect.navigation.path
    st.rerun()


def pop_flash_message():
    message = st.session_state.get("flash_message")
    st.session_state.flash_message = None
    return message


def logout():
    get_controller().logout()
