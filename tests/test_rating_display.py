import pytest

from use_cases.rating_display import StarBreakdown, format_average, render_stars, star_breakdown


@pytest.mark.parametrize("rating, expected", [
    (0, StarBreakdown(full=0, half=False, empty=5)),
    (None, StarBreakdown(full=0, half=False, empty=5)),
    (7, StarBreakdown(full=3, half=True, empty=1)),
    (7.9, StarBreakdown(full=3, half=True, empty=1)),
    (8, StarBreakdown(full=4, half=False, empty=1)),
    (10, StarBreakdown(full=5, half=False, empty=0)),
    (12, StarBreakdown(full=5, half=False, empty=0)),
    (-3, StarBreakdown(full=0, half=False, empty=5)),
])
def test_star_breakdown(rating, expected):
    assert star_breakdown(rating) == expected


def test_render_stars_always_five_symbols():
    for rating in range(0, 11):
        assert len(render_stars(rating)) == 5
    assert render_stars(7) == "★★★⯪☆"


@pytest.mark.parametrize("value, expected", [(0.0, "-"), (None, "-"), (7.25, "7.2"), (8, "8.0")])
def test_format_average(value, expected):
    assert format_average(value) == expected
