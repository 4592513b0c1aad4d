import logging

import pandas as pd
import plotly.express as px
import streamlit as st

import ui
from infrastructure.http.errors import ApiError
from services import movie_service, review_service
from use_cases import effects
from use_cases.validation import MAX_COMMENT, ValidationError, build_review_payload
from utils import session_manager

log = logging.getLogger(__name__)

GRID_COLUMNS = 3


def _render_rating_distribution(reviews):
    df = pd.DataFrame(reviews)
    if df.empty or "rating" not in df.columns:
        return
    counts = (
        df["rating"].value_counts()
        .reindex(range(0, 11), fill_value=0)
        .rename_axis("Rating")
        .reset_index(name="Reviews")
    )
    fig = px.bar(counts, x="Rating", y="Reviews", color_discrete_sequence=["#ffd700"])
    st.plotly_chart(ui.update_chart_layout(fig), use_container_width=True)


def _render_reviews(reviews):
    if not reviews:
        st.caption("No reviews yet.")
        return
    _render_rating_distribution(reviews)
    for review in reviews:
        author = review.get("username") or "anonymous"
        st.markdown(f"**{review.get('rating', '-')}/10** · {author}")
        if review.get("comment"):
            st.write(review["comment"])


def _render_review_form(client, movie):
    movie_id = movie["id"]
    with st.form(f"review_form_{movie_id}", clear_on_submit=True):
        rating = st.selectbox("Rating", options=list(range(10, -1, -1)), index=0)
        comment = st.text_area("Comment", max_chars=MAX_COMMENT)
        submitted = st.form_submit_button("Submit review")

    if not submitted:
        return

    try:
        payload = build_review_payload(movie_id, rating, comment)
    except ValidationError as e:
        ui.render_field_errors(e.errors)
        return

    try:
        review_service.add_review(client, payload)
    except ApiError as e:
        session_manager.apply_error_effect(effects.handle_api_error(e))
        return
    st.session_state.review_open_for = None
    st.success("Review saved.")
    st.rerun()


def _render_movie(client, movie):
    try:
        average = review_service.get_average_rating(client, movie["id"])
    except ApiError as e:
        session_manager.apply_error_effect(effects.handle_api_error(e))
        return
    ui.render_movie_card(movie, average)

    is_open = st.session_state.get("review_open_for") == movie["id"]
    label = "Hide reviews" if is_open else "Reviews"
    if st.button(label, key=f"toggle_reviews_{movie['id']}"):
        st.session_state.review_open_for = None if is_open else movie["id"]
        st.rerun()

    if is_open:
        try:
            reviews = review_service.get_reviews_by_movie(client, movie["id"])
        except ApiError as e:
            session_manager.apply_error_effect(effects.handle_api_error(e))
            return
        _render_reviews(reviews)
        _render_review_form(client, movie)


def render_movies():
    st.header("🎬 Movies")
    client = session_manager.get_api_client()

    with st.spinner("Loading movies..."):
        try:
            movies = movie_service.get_all_movies(client)
        except ApiError as e:
            session_manager.apply_error_effect(effects.handle_api_error(e))
            return

    if not movies:
        ui.render_empty_state("No movies yet", "An admin can add the first one in the movie manager.")
        return

    log.info(f"Rendering {len(movies)} movies")
    for start in range(0, len(movies), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for col, movie in zip(columns, movies[start:start + GRID_COLUMNS]):
            with col:
                _render_movie(client, movie)
