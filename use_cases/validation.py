"""Client-side form validation. Errors are keyed by form field and block submission."""

import re
from datetime import datetime
from typing import Any, Dict, Optional

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

FIRST_FILM_YEAR = 1888
MAX_DESCRIPTION = 1000
MAX_COMMENT = 500
MIN_RATING = 0
MAX_RATING = 10


class ValidationError(Exception):
    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


def _raise_if(errors: Dict[str, str]):
    if errors:
        raise ValidationError(errors)


def validate_login(identifier: str, password: str):
    errors = {}
    identifier = (identifier or "").strip()
    if not identifier:
        errors["username"] = "Username or email is required"
    elif len(identifier) < 3:
        errors["username"] = "At least 3 characters required"

    if not password:
        errors["password"] = "Password is required"
    elif len(password) < 6:
        errors["password"] = "Password must be at least 6 characters long"
    _raise_if(errors)


def build_registration_payload(username, email, password, password_confirm) -> Dict[str, str]:
    errors = {}
    username = (username or "").strip()
    email = (email or "").strip()
    if not 3 <= len(username) <= 50:
        errors["username"] = "Username must be between 3 and 50 characters"
    if not EMAIL_RE.match(email):
        errors["email"] = "Email must be a valid address"
    if not password or len(password) < 6:
        errors["password"] = "Password must be at least 6 characters long"
    elif password != password_confirm:
        errors["password_confirm"] = "Passwords do not match"
    _raise_if(errors)
    return {"username": username, "email": email, "password": password}


def _to_number(value: Any, cast):
    try:
        return cast(value)
    except (TypeError, ValueError, OverflowError):
        return None


def build_movie_payload(form: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the movie form and return the MovieRecord body sent to the backend."""
    errors = {}
    title = str(form.get("title") or "").strip()
    director = str(form.get("director") or "").strip()
    genre = str(form.get("genre") or "").strip()
    description = str(form.get("description") or "").strip()
    release_year = _to_number(form.get("releaseYear"), int)
    rating = _to_number(form.get("rating"), float)

    if not title:
        errors["title"] = "Title is required"
    if not director:
        errors["director"] = "Director is required"
    if not genre:
        errors["genre"] = "Genre is required"
    if release_year is None or release_year < FIRST_FILM_YEAR:
        errors["releaseYear"] = f"Movies only exist since {FIRST_FILM_YEAR}"
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        errors["rating"] = f"Rating must be between {MIN_RATING} and {MAX_RATING}"
    if len(description) > MAX_DESCRIPTION:
        errors["description"] = f"Description may be at most {MAX_DESCRIPTION} characters"
    _raise_if(errors)

    return {
        "title": title,
        "description": description,
        "genre": genre,
        "releaseYear": release_year,
        "director": director,
        "rating": rating,
    }


def build_review_payload(movie_id: Any, rating: Any, comment: Optional[str] = None) -> Dict[str, Any]:
    """Coerce the rating to an integer before it goes on the wire."""
    errors = {}
    score = _to_number(rating, lambda v: int(float(v)))
    if score is None or not MIN_RATING <= score <= MAX_RATING:
        errors["rating"] = f"Rating must be a whole number between {MIN_RATING} and {MAX_RATING}"
    comment = (comment or "").strip()
    if len(comment) > MAX_COMMENT:
        errors["comment"] = f"Comment may be at most {MAX_COMMENT} characters"
    _raise_if(errors)
    return {"movieId": movie_id, "rating": score, "comment": comment}


def default_movie_form() -> Dict[str, Any]:
    return {
        "title": "",
        "description": "",
        "genre": "",
        "releaseYear": datetime.now().year,
        "director": "",
        "rating": 5.0,
    }
