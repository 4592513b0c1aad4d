import json
from unittest.mock import patch

import pytest
import requests

from infrastructure.http.api_client import ApiClient
from infrastructure.http.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NetworkError,
)
from infrastructure.repositories.sqlite_kv_repository import InMemoryKeyValueRepository
from infrastructure.storage.session_store import SessionStore
from use_cases import effects

BASE_URL = "http://backend.test/api"
USER_DATA = {"id": 1, "username": "alice", "email": "alice@example.com", "role": "USER"}


def _response(status, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = "utf-8"
    if body is not None:
        resp._content = json.dumps(body).encode()
    elif text is not None:
        resp._content = text.encode()
    else:
        resp._content = b""
    return resp


@pytest.fixture
def store():
    return SessionStore(InMemoryKeyValueRepository(), "client")


@pytest.fixture
def client(store):
    return ApiClient(BASE_URL, store, timeout=3)


@patch("requests.Session.request")
def test_bearer_header_attached_when_token_stored(mock_request, client, store):
    store.save("abc", USER_DATA)
    mock_request.return_value = _response(200, [])

    client.get("/movies")

    args, kwargs = mock_request.call_args
    assert args == ("GET", f"{BASE_URL}/movies")
    assert kwargs["headers"]["Authorization"] == "Bearer abc"
    assert kwargs["timeout"] == 3


@patch("requests.Session.request")
def test_no_authorization_header_without_token(mock_request, client):
    mock_request.return_value = _response(200, [])

    client.get("/movies")

    assert "Authorization" not in mock_request.call_args.kwargs["headers"]


@patch("requests.Session.request")
def test_post_sends_json_body(mock_request, client):
    mock_request.return_value = _response(201, {"id": 9})

    result = client.post("/movies", {"title": "Alien"})

    assert result == {"id": 9}
    assert mock_request.call_args.kwargs["json"] == {"title": "Alien"}


@patch("requests.Session.request")
def test_empty_body_reads_as_none(mock_request, client):
    mock_request.return_value = _response(204)
    assert client.delete("/movies/1") is None


@pytest.mark.parametrize("path", ["/movies", "/reviews/movie/3", "/auth/me"])
@patch("requests.Session.request")
def test_401_clears_store_and_redirects_to_login(mock_request, path, client, store):
    store.save("stale", USER_DATA)
    mock_request.return_value = _response(401, {"error": "Token expired"})

    with pytest.raises(AuthenticationError) as exc_info:
        client.get(path)

    assert store.get_token() is None
    assert store.get_user_data() is None
    effect = effects.handle_api_error(exc_info.value)
    assert effect.navigation is not None
    assert effect.navigation.path == "/login"


@patch("requests.Session.request")
def test_403_keeps_store(mock_request, client, store):
    store.save("tok", USER_DATA)
    mock_request.return_value = _response(403, {"message": "Forbidden"})

    with pytest.raises(AuthorizationError) as exc_info:
        client.delete("/movies/1")

    assert exc_info.value.status == 403
    assert store.get_token() == "tok"
    assert store.get_user_data() == USER_DATA


@patch("requests.Session.request", side_effect=requests.Timeout("slow"))
def test_timeout_becomes_network_error(_mock_request, client, store):
    store.save("tok", USER_DATA)

    with pytest.raises(NetworkError) as exc_info:
        client.get("/movies")

    assert exc_info.value.status is None
    assert store.get_token() == "tok"


@patch("requests.Session.request", side_effect=requests.ConnectionError("refused"))
def test_connection_error_becomes_network_error(_mock_request, client):
    with pytest.raises(NetworkError):
        client.get("/movies")


@pytest.mark.parametrize("resp, expected", [
    (_response(400, {"error": "Username already taken"}), "Username already taken"),
    (_response(404, {"status": 404, "message": "Movie not found"}), "Movie not found"),
    (_response(500, text="boom"), "boom"),
    (_response(502), "HTTP 502"),
])
@patch("requests.Session.request")
def test_domain_errors_carry_server_message(mock_request, resp, expected, client):
    mock_request.return_value = resp

    with pytest.raises(DomainError) as exc_info:
        client.get("/movies/1")

    assert exc_info.value.message == expected
    assert exc_info.value.status == resp.status_code


def test_base_url_trailing_slash_is_ignored(store):
    client = ApiClient(BASE_URL + "/", store)
    with patch("requests.Session.request", return_value=_response(200, [])) as mock_request:
        client.get("movies")
    assert mock_request.call_args.args[1] == f"{BASE_URL}/movies"
