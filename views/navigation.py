import streamlit as st

from use_cases.route_guard import ADMIN, HOME, LOGIN, MOVIES
from use_cases.session_models import is_admin
from utils import session_manager


def _nav_button(route, current_path):
    is_current = route.path == current_path
    if st.button(route.title, key=f"nav_{route.path}", use_container_width=True,
                 type="primary" if is_current else "secondary"):
        session_manager.navigate(route.path)


def render_sidebar(session, current_path):
    with st.sidebar:
        st.markdown("## 🎬 CINEBASE")
        _nav_button(HOME, current_path)

        if not session.authenticated:
            _nav_button(LOGIN, current_path)
            return

        _nav_button(MOVIES, current_path)
        if is_admin(session.user):
            _nav_button(ADMIN, current_path)

        st.divider()
        st.caption(f"Hello, {session.user.username}")
        if st.button("Logout", key="logout_btn", type="secondary", use_container_width=True):
            session_manager.logout()
