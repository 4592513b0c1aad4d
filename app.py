import logging
from datetime import datetime

import streamlit as st
import streamlit.components.v1 as components

from infrastructure.observability import setup_observability, tag_user
setup_observability()

import ui
from use_cases import auth_flow, bootstrap
from use_cases.route_guard import ADMIN, FORBIDDEN, HOME, LOGIN, MOVIES
from utils import session_manager
from views import admin_view, login_view, movies_view, navigation, pages_view

log = logging.getLogger(__name__)

st.set_page_config(page_title="CINEBASE", page_icon="🎬", layout="wide", initial_sidebar_state="expanded")

# Health Check (basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok", "version": "1.0", "uptime": datetime.utcnow().isoformat()})
    st.stop()

components.html(
    """
    <script>
    var meta = document.createElement('meta');
    meta.name = "referrer";
    meta.content = "no-referrer";
    document.getElementsByTagName('head')[0].appendChild(meta);
    </script>
    """,
    height=0,
)

ui.setup_style()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.stop()

session = session_manager.current_session()
path = session_manager.current_path()

flash = session_manager.pop_flash_message()
if flash:
    st.warning(flash)

# --- ROUTE ACCESS ---
access = auth_flow.resolve_access(session, path)

if access.status == "WAIT":
    ui.show_loading_placeholder()
    st.stop()

if access.status == "REDIRECT":
    log.info(f"Redirecting {path} -> {access.redirect_to} ({access.reason})")
    session_manager.navigate(access.redirect_to)

if session.authenticated:
    tag_user(session.user.id, session.user.role)

navigation.render_sidebar(session, access.route.path)

route = access.route
if route == HOME:
    pages_view.render_home(session)
elif route == LOGIN:
    login_view.render_auth_screen()
elif route == MOVIES:
    movies_view.render_movies()
elif route == ADMIN:
    admin_view.render_admin_panel()
elif route == FORBIDDEN:
    pages_view.render_forbidden()
else:
    pages_view.render_not_found()
