import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from infrastructure.http.api_client import ApiClient
from infrastructure.http.errors import AuthenticationError, DomainError, NetworkError
from infrastructure.repositories.sqlite_kv_repository import InMemoryKeyValueRepository
from infrastructure.storage.session_store import SessionStore
from services import auth_service, movie_service, review_service
from use_cases import effects


def test_login_posts_identifier_as_username_or_email():
    client = MagicMock()
    client.post.return_value = {"token": "t"}

    assert auth_service.login(client, "alice", "secret1") == {"token": "t"}
    client.post.assert_called_once_with("/auth/login", {"usernameOrEmail": "alice", "password": "secret1"})


def test_register_posts_payload():
    client = MagicMock()
    payload = {"username": "bob", "email": "b@example.com", "password": "secret1"}
    auth_service.register(client, payload)
    client.post.assert_called_once_with("/auth/register", payload)


@pytest.mark.parametrize("call, operation", [
    (lambda c: auth_service.login(c, "a", "b"), "login"),
    (lambda c: movie_service.get_all_movies(c), "get_all_movies"),
    (lambda c: movie_service.get_movie_by_id(c, 1), "get_movie_by_id"),
    (lambda c: movie_service.create_movie(c, {}), "create_movie"),
    (lambda c: movie_service.update_movie(c, 1, {}), "update_movie"),
    (lambda c: movie_service.delete_movie(c, 1), "delete_movie"),
    (lambda c: review_service.add_review(c, {}), "add_review"),
    (lambda c: review_service.get_reviews_by_movie(c, 1), "get_reviews_by_movie"),
])
def test_errors_are_tagged_with_operation(call, operation):
    client = MagicMock()
    error = DomainError("nope", status=400)
    client.get.side_effect = error
    client.post.side_effect = error
    client.put.side_effect = error
    client.delete.side_effect = error

    with pytest.raises(DomainError) as exc_info:
        call(client)

    assert exc_info.value.operation == operation
    assert exc_info.value.message == "nope"


def test_movie_endpoints():
    client = MagicMock()
    client.get.return_value = None

    assert movie_service.get_all_movies(client) == []
    client.get.assert_called_with("/movies")

    movie_service.get_movie_by_id(client, 5)
    client.get.assert_called_with("/movies/5")

    movie_service.update_movie(client, 5, {"title": "Heat"})
    client.put.assert_called_once_with("/movies/5", {"title": "Heat"})

    assert movie_service.delete_movie(client, 5) is None
    client.delete.assert_called_once_with("/movies/5")


def test_reviews_by_movie_endpoint():
    client = MagicMock()
    client.get.return_value = [{"rating": 8}]
    assert review_service.get_reviews_by_movie(client, 3) == [{"rating": 8}]
    client.get.assert_called_once_with("/reviews/movie/3")


def test_average_rating_is_float():
    client = MagicMock()
    client.get.return_value = 7
    assert review_service.get_average_rating(client, 1) == 7.0
    client.get.assert_called_once_with("/reviews/movie/1/average")


@pytest.mark.parametrize("error", [
    NetworkError("down"),
    DomainError("Internal Server Error", status=500),
])
def test_average_rating_falls_back_to_zero(error):
    client = MagicMock()
    client.get.side_effect = error
    assert review_service.get_average_rating(client, 1) == 0.0


def test_average_rating_missing_value_is_zero():
    client = MagicMock()
    client.get.return_value = None
    assert review_service.get_average_rating(client, 1) == 0.0


def _response(status, body):
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = "utf-8"
    resp._content = json.dumps(body).encode()
    return resp


@patch("requests.Session.request", return_value=_response(401, {"error": "Token expired"}))
def test_average_rating_expired_session_redirects_to_login(_mock_request):
    store = SessionStore(InMemoryKeyValueRepository(), "client")
    store.save("stale", {"id": 1, "username": "alice", "email": "", "role": "USER"})
    client = ApiClient("http://backend.test/api", store)

    with pytest.raises(AuthenticationError) as exc_info:
        review_service.get_average_rating(client, 3)

    assert exc_info.value.operation == "get_average_rating"
    assert store.is_empty()
    effect = effects.handle_api_error(exc_info.value)
    assert effect.navigation == effects.NavigationCommand("/login")


@pytest.mark.parametrize("failure", [
    _response(500, {"message": "Internal Server Error"}),
    requests.Timeout("slow"),
])
def test_average_rating_server_or_network_failure_keeps_session(failure):
    store = SessionStore(InMemoryKeyValueRepository(), "client")
    store.save("tok", {"id": 1, "username": "alice", "email": "", "role": "USER"})
    client = ApiClient("http://backend.test/api", store)
    side_effect = failure if isinstance(failure, Exception) else None
    return_value = None if side_effect else failure

    with patch("requests.Session.request", side_effect=side_effect, return_value=return_value):
        assert review_service.get_average_rating(client, 3) == 0.0

    assert store.get_token() == "tok"
