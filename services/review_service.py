import logging

from infrastructure.http.errors import AuthenticationError, tagged

log = logging.getLogger(__name__)


@tagged("add_review")
def add_review(client, review_data):
    """POST /reviews with `{movieId, rating, comment}`."""
    return client.post("/reviews", review_data)


def get_average_rating(client, movie_id) -> float:
    """
    Community average for a movie.
    An expired session still raises AuthenticationError; any other failure reads as 0.0.
    """
    try:
        value = client.get(f"/reviews/movie/{movie_id}/average")
        return float(value) if value is not None else 0.0
    except AuthenticationError as e:
        e.operation = "get_average_rating"
        raise
    except Exception as e:
        log.error(f"Failed to load average rating for movie {movie_id}: {e}")
        return 0.0


@tagged("get_reviews_by_movie")
def get_reviews_by_movie(client, movie_id):
    return client.get(f"/reviews/movie/{movie_id}") or []
