"""Star rendering for 0-10 ratings shown on a five-star scale."""

import math
from dataclasses import dataclass
from typing import Optional

MAX_STARS = 5


@dataclass(frozen=True)
class StarBreakdown:
    full: int
    half: bool
    empty: int


def star_breakdown(rating: Optional[float]) -> StarBreakdown:
    r = min(max(float(rating or 0.0), 0.0), 10.0)
    stars = r / 2
    full = math.floor(stars)
    half = (stars - full) >= 0.5
    empty = MAX_STARS - full - (1 if half else 0)
    return StarBreakdown(full=full, half=half, empty=empty)


def render_stars(rating: Optional[float]) -> str:
    b = star_breakdown(rating)
    return "★" * b.full + ("⯪" if b.half else "") + "☆" * b.empty


def format_average(value: Optional[float]) -> str:
    """Community average with one decimal; '-' when there is none yet."""
    if not value:
        return "-"
    return f"{value:.1f}"
