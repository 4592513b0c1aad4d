import logging

import pandas as pd
import streamlit as st

import ui
from infrastructure.http.errors import ApiError
from services import movie_service, review_service
from use_cases import effects
from use_cases.rating_display import format_average
from use_cases.validation import (
    FIRST_FILM_YEAR,
    MAX_DESCRIPTION,
    ValidationError,
    build_movie_payload,
    default_movie_form,
)
from utils import session_manager

log = logging.getLogger(__name__)


def _movies_frame(client, movies):
    rows = []
    for movie in movies:
        rows.append({
            "ID": movie.get("id"),
            "Title": movie.get("title"),
            "Year": movie.get("releaseYear"),
            "Genre": movie.get("genre"),
            "Director": movie.get("director"),
            "Jury": movie.get("rating"),
            "★ Press": format_average(review_service.get_average_rating(client, movie["id"])),
        })
    return pd.DataFrame(rows)


def _render_movie_form(client):
    editing = st.session_state.get("editing_movie")
    values = dict(default_movie_form())
    if editing:
        values.update({k: v for k, v in editing.items() if v is not None})

    st.subheader(f"✏️ Edit: {editing['title']}" if editing else "➕ New movie")
    with st.form("movie_form", clear_on_submit=not editing):
        title = st.text_input("Title *", value=values["title"])
        col1, col2 = st.columns(2)
        with col1:
            director = st.text_input("Director *", value=values["director"])
            release_year = st.number_input("Release year *", min_value=FIRST_FILM_YEAR, max_value=2100,
                                           value=int(values["releaseYear"]), step=1)
        with col2:
            genre = st.text_input("Genre *", value=values["genre"])
            rating = st.number_input("Jury rating (0-10)", min_value=0.0, max_value=10.0,
                                     value=float(values["rating"]), step=0.1)
        description = st.text_area("Description", value=values["description"], max_chars=MAX_DESCRIPTION)

        c_save, c_cancel = st.columns(2)
        submitted = c_save.form_submit_button("💾 Save", type="primary", use_container_width=True)
        cancelled = c_cancel.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        st.session_state.editing_movie = None
        st.rerun()
    if not submitted:
        return

    try:
        payload = build_movie_payload({
            "title": title,
            "description": description,
            "genre": genre,
            "releaseYear": release_year,
            "director": director,
            "rating": rating,
        })
    except ValidationError as e:
        ui.render_field_errors(e.errors)
        return

    try:
        if editing:
            movie_service.update_movie(client, editing["id"], payload)
            log.info(f"✅ Movie {editing['id']} updated")
        else:
            movie_service.create_movie(client, payload)
            log.info(f"✅ Movie {payload['title']} created")
    except ApiError as e:
        session_manager.apply_error_effect(effects.handle_api_error(e))
        return

    st.session_state.editing_movie = None
    st.success("Movie saved.")
    st.rerun()


def _render_row_actions(client, movies):
    options = {m["id"]: f"{m.get('title')} ({m.get('releaseYear')})" for m in movies}
    selected_id = st.selectbox("Movie", options=list(options), format_func=options.get)

    col_edit, col_delete = st.columns(2)
    if col_edit.button("✏️ Edit", use_container_width=True):
        try:
            st.session_state.editing_movie = movie_service.get_movie_by_id(client, selected_id)
        except ApiError as e:
            session_manager.apply_error_effect(effects.handle_api_error(e))
            return
        st.rerun()

    if col_delete.button("🗑 Delete", use_container_width=True):
        st.session_state.confirm_delete_id = selected_id

    pending = st.session_state.get("confirm_delete_id")
    if pending is None:
        return

    st.warning(f"Really delete {options.get(pending, pending)}?")
    c_yes, c_no = st.columns(2)
    if c_yes.button("Yes, delete", type="primary", use_container_width=True):
        st.session_state.confirm_delete_id = None
        try:
            movie_service.delete_movie(client, pending)
        except ApiError as e:
            session_manager.apply_error_effect(effects.handle_api_error(e))
            return
        log.info(f"🗑 Movie {pending} deleted")
        editing = st.session_state.get("editing_movie")
        if editing and editing.get("id") == pending:
            st.session_state.editing_movie = None
        st.rerun()
    if c_no.button("Keep it", use_container_width=True):
        st.session_state.confirm_delete_id = None
        st.rerun()


def render_admin_panel():
    st.header("⚙️ Movie Manager")
    client = session_manager.get_api_client()

    _render_movie_form(client)
    st.divider()

    try:
        movies = movie_service.get_all_movies(client)
    except ApiError as e:
        session_manager.apply_error_effect(effects.handle_api_error(e))
        return

    st.subheader(f"🎞 Catalogue ({len(movies)})")
    if not movies:
        st.info("No movies yet. Use the form above to add the first one.")
        return

    try:
        frame = _movies_frame(client, movies)
    except ApiError as e:
        session_manager.apply_error_effect(effects.handle_api_error(e))
        return

    ui.render_aggrid(
        frame,
        height=420,
        pagination=len(movies) > 25,
        decimal_columns=("Jury",),
    )
    _render_row_actions(client, movies)
