import streamlit as st

from infrastructure.http.errors import ApiError
from services import auth_service
from use_cases import effects
from use_cases.session_controller import LoginError
from use_cases.validation import ValidationError, build_registration_payload, validate_login
from utils import session_manager

AFTER_LOGIN_PATH = "/movies"


def _render_login_tab(controller):
    with st.form("login_form", clear_on_submit=False):
        identifier = st.text_input("Username or email", placeholder="e.g. admin")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in", use_container_width=True)

    if not submitted:
        return

    try:
        validate_login(identifier, password)
    except ValidationError as e:
        for message in e.errors.values():
            st.error(message)
        return

    with st.spinner("Logging in..."):
        try:
            controller.login(identifier.strip(), password)
        except LoginError as e:
            st.error(str(e))
            return
    session_manager.navigate(AFTER_LOGIN_PATH)


def _render_register_tab(controller):
    with st.form("register_form", clear_on_submit=True):
        username = st.text_input("Username *")
        email = st.text_input("Email *")
        password = st.text_input("Password *", type="password")
        password_confirm = st.text_input("Confirm password *", type="password")
        submitted = st.form_submit_button("Register", use_container_width=True)

    if not submitted:
        return

    try:
        payload = build_registration_payload(username, email, password, password_confirm)
    except ValidationError as e:
        for message in e.errors.values():
            st.error(message)
        return

    try:
        created = auth_service.register(controller.api_client, payload)
    except ApiError as e:
        st.error(effects.handle_api_error(e).message)
        return
    name = created.get("username", payload["username"]) if isinstance(created, dict) else payload["username"]
    st.success(f"Account {name} created. You can log in now.")


def render_auth_screen():
    controller = session_manager.get_controller()

    st.markdown("<h2 style='text-align: center;'>Welcome to CINEBASE</h2>", unsafe_allow_html=True)
    _, col, _ = st.columns([1, 2, 1])
    with col:
        tab_login, tab_register = st.tabs(["Log in", "Register"])
        with tab_login:
            _render_login_tab(controller)
        with tab_register:
            _render_register_tab(controller)
