import html

import pandas as pd
import requests
import streamlit as st
from st_aggrid import AgGrid, GridOptionsBuilder, GridUpdateMode, JsCode
from streamlit_lottie import st_lottie

from use_cases.rating_display import format_average, render_stars

EMPTY_ANIMATION_URL = "https://assets5.lottiefiles.com/packages/lf20_a1xjeug1.json"


def setup_style():
    st.markdown("""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Manrope:wght@400;600;700;800&display=swap');

        :root {
            --card-bg: rgba(255, 255, 255, 0.04);
            --card-border: rgba(255, 255, 255, 0.12);
            --text-main: #f5f5f5;
            --text-soft: rgba(230, 230, 230, 0.65);
            --accent: #ffd700;
            --danger: #c62828;
        }

        html, body, .stApp {
            font-family: 'Manrope', sans-serif;
            color: var(--text-main);
            background: linear-gradient(180deg, #121212 0%, #1a1a1a 100%);
        }

        .cb-card {
            border: 1px solid var(--card-border);
            border-radius: 10px;
            padding: 1.2rem 1.4rem;
            background: var(--card-bg);
            box-shadow: 0 2px 8px rgba(0, 0, 0, 0.35);
            margin-bottom: 0.6rem;
        }

        .cb-card h3 {
            margin: 0 0 0.4rem 0;
        }

        .cb-badge {
            float: right;
            background: rgba(255, 255, 255, 0.08);
            padding: 4px 8px;
            border-radius: 4px;
            font-size: 0.8rem;
            font-weight: 700;
        }

        .cb-meta {
            font-size: 0.9rem;
            color: var(--text-soft);
            margin-bottom: 0.8rem;
        }

        .cb-stars {
            color: var(--accent);
            font-size: 1.1rem;
            letter-spacing: 2px;
        }

        .cb-center {
            text-align: center;
            margin-top: 50px;
        }

        .cb-error-code {
            font-size: 3rem;
            font-weight: 800;
            margin-bottom: 0.5rem;
        }
    </style>
    """, unsafe_allow_html=True)


def show_loading_placeholder(message="Loading CINEBASE..."):
    st.markdown(f"<div class='cb-center'><h3>{html.escape(message)}</h3></div>", unsafe_allow_html=True)


def render_movie_card(movie, average_rating):
    title = html.escape(str(movie.get("title", "")))
    meta = " • ".join(
        html.escape(str(movie.get(k))) for k in ("releaseYear", "genre", "director") if movie.get(k)
    )
    description = html.escape(str(movie.get("description") or ""))
    st.markdown(
        f"""
        <div class="cb-card">
          <span class="cb-badge">⭐ {movie.get('rating', '-')}</span>
          <h3>{title}</h3>
          <div class="cb-meta">{meta}</div>
          <p>{description}</p>
          <div>
            <span class="cb-stars">{render_stars(average_rating)}</span>
            <span class="cb-meta">&nbsp;Press: {format_average(average_rating)}</span>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_field_errors(errors):
    for field, message in errors.items():
        st.error(f"{field}: {message}")


def update_chart_layout(fig):
    fig.update_layout(
        template="plotly_dark",
        font=dict(family="Manrope, sans-serif", size=13, color="#f5f5f5"),
        margin=dict(l=20, r=20, t=40, b=20),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(255,255,255,0.04)",
        xaxis=dict(showgrid=False, zeroline=False, dtick=1),
        yaxis=dict(showgrid=True, gridcolor="rgba(255,255,255,0.1)", zeroline=False),
        showlegend=False,
    )
    return fig


def render_aggrid(df, height=400, pagination=False, decimal_columns=()):
    if df.empty:
        st.info("Nothing to show")
        return

    gb = GridOptionsBuilder.from_dataframe(df)
    gb.configure_default_column(filterable=True, sortable=True, resizable=True, wrapText=True, autoHeight=True)

    for col in df.columns:
        if col in decimal_columns and pd.api.types.is_numeric_dtype(df[col]):
            jscode_str = """function(params) {
                if (params.value == null || Number.isNaN(Number(params.value))) return '-';
                return Number(params.value).toFixed(1);
            }"""
            gb.configure_column(col, valueFormatter=JsCode(jscode_str), minWidth=80, flex=1, maxWidth=140)
        else:
            gb.configure_column(col, minWidth=150, flex=3)

    if pagination:
        gb.configure_pagination(paginationAutoPageSize=False, paginationPageSize=25)

    AgGrid(
        df,
        gridOptions=gb.build(),
        height=height,
        theme="balham",
        update_mode=GridUpdateMode.NO_UPDATE,
        allow_unsafe_jscode=True,
    )


@st.cache_data
def load_lottieurl(url: str):
    try:
        r = requests.get(url, timeout=5)
        if r.status_code == 200:
            return r.json()
    except (requests.RequestException, ValueError):
        return None
    return None


def render_empty_state(title, hint):
    lottie_empty = load_lottieurl(EMPTY_ANIMATION_URL)

    st.markdown("<br><br>", unsafe_allow_html=True)
    _, col, _ = st.columns([1, 2, 1])
    with col:
        if lottie_empty:
            st_lottie(lottie_empty, height=260, key="empty_state")
        st.markdown(
            f"<h3 style='text-align: center; color: var(--text-soft);'>{html.escape(title)}</h3>"
            f"<p style='text-align: center; color: rgba(255,255,255,0.4);'>{html.escape(hint)}</p>",
            unsafe_allow_html=True,
        )
