import streamlit as st

from use_cases.route_guard import HOME, LOGIN, MOVIES
from utils import session_manager


def render_home(session):
    st.markdown(
        """
        <div class="cb-center">
          <h1>🎬 CINEBASE</h1>
          <p class="cb-meta">Movies, jury ratings and what the audience thinks of them.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    _, col, _ = st.columns([1, 1, 1])
    with col:
        if session.authenticated:
            if st.button("Browse movies", type="primary", use_container_width=True):
                session_manager.navigate(MOVIES.path)
        elif st.button("Log in", type="primary", use_container_width=True):
            session_manager.navigate(LOGIN.path)


def _render_error_page(code, title, text):
    st.markdown(
        f"""
        <div class="cb-center">
          <div class="cb-error-code">{code}</div>
          <h2>{title}</h2>
          <p class="cb-meta">{text}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    _, col, _ = st.columns([1, 1, 1])
    with col:
        if st.button("Back to start", use_container_width=True):
            session_manager.navigate(HOME.path)


def render_forbidden():
    _render_error_page("403", "Access denied", "You do not have permission to view this page.")


def render_not_found():
    _render_error_page("404", "Page not found", "The page you are looking for does not exist.")
