import json
from unittest.mock import MagicMock, patch

import pytest

from infrastructure.http.errors import DomainError, NetworkError
from infrastructure.repositories.sqlite_kv_repository import InMemoryKeyValueRepository, SQLiteKeyValueRepository
from infrastructure.storage.session_store import USER_DATA_KEY, SessionStore
from use_cases.session_controller import LoginError, SessionController
from use_cases.session_models import UserProfile

LOGIN_RESPONSE = {
    "token": "jwt-token",
    "userId": 1,
    "username": "admin",
    "email": "admin@cinebase.test",
    "role": "ADMIN",
}


@pytest.fixture
def store():
    return SessionStore(InMemoryKeyValueRepository(), "client")


def _controller(store, navigate=None):
    return SessionController(store, MagicMock(), navigate=navigate)


@patch("use_cases.session_controller.auth_service.login", return_value=LOGIN_RESPONSE)
def test_login_then_restore_in_fresh_controller(mock_login, tmp_path):
    repo = SQLiteKeyValueRepository(str(tmp_path / "s.db"))
    repo.init_db()
    controller = _controller(SessionStore(repo, "client"))
    controller.restore()

    session = controller.login("admin", "secret1")

    assert session.authenticated is True
    assert session.token == "jwt-token"
    assert session.user == UserProfile(id=1, username="admin", email="admin@cinebase.test", role="ADMIN")
    mock_login.assert_called_once_with(controller.api_client, "admin", "secret1")

    reloaded = _controller(SessionStore(repo, "client"))
    assert reloaded.session.loading is True
    restored = reloaded.restore()
    assert restored.loading is False
    assert restored.authenticated is True
    assert restored.user == session.user
    assert restored.token == "jwt-token"


def test_restore_without_stored_data(store):
    session = _controller(store).restore()
    assert session.loading is False
    assert session.authenticated is False


def test_restore_with_token_only(store):
    store.repository.set("client", "authToken", "tok")
    session = _controller(store).restore()
    assert session.authenticated is False
    assert session.loading is False


def test_restore_with_corrupt_user_data(store):
    store.repository.set("client", "authToken", "tok")
    store.repository.set("client", USER_DATA_KEY, "{broken")
    session = _controller(store).restore()
    assert session.authenticated is False
    assert session.loading is False


def test_restore_with_unusable_profile(store):
    store.save("tok", {"username": "no-id", "role": "USER"})
    session = _controller(store).restore()
    assert session.authenticated is False


def test_restore_clears_loading_even_when_store_fails():
    broken = MagicMock()
    broken.get_token.side_effect = RuntimeError("disk gone")
    controller = _controller(broken)

    with pytest.raises(RuntimeError):
        controller.restore()
    assert controller.session.loading is False


@pytest.mark.parametrize("error, message", [
    (DomainError("Invalid credentials", status=401), "Invalid credentials"),
    (NetworkError("down"), "Server not reachable. Please try again."),
])
def test_login_failure_leaves_state_untouched(error, message, store):
    controller = _controller(store)
    controller.restore()
    before = controller.session

    with patch("use_cases.session_controller.auth_service.login", side_effect=error):
        with pytest.raises(LoginError) as exc_info:
            controller.login("admin", "wrong-pass")

    assert str(exc_info.value) == message
    assert controller.session == before
    assert store.is_empty()


@patch("use_cases.session_controller.auth_service.login", return_value={"userId": 1, "username": "x", "role": "USER"})
def test_login_without_token_fails(_mock_login, store):
    controller = _controller(store)
    controller.restore()
    with pytest.raises(LoginError):
        controller.login("x", "secret1")
    assert store.is_empty()
    assert controller.session.authenticated is False


@patch("use_cases.session_controller.auth_service.login", return_value=LOGIN_RESPONSE)
def test_login_persists_user_record(_mock_login, store):
    controller = _controller(store)
    controller.restore()
    controller.login("admin", "secret1")

    assert store.get_token() == "jwt-token"
    assert json.loads(store.repository.get("client", USER_DATA_KEY)) == {
        "id": 1,
        "username": "admin",
        "email": "admin@cinebase.test",
        "role": "ADMIN",
    }


@patch("use_cases.session_controller.auth_service.login", return_value=LOGIN_RESPONSE)
def test_logout_clears_everything_and_goes_home(_mock_login, store):
    navigate = MagicMock()
    controller = _controller(store, navigate=navigate)
    controller.restore()
    controller.login("admin", "secret1")

    session = controller.logout()

    assert session.authenticated is False
    assert session.user is None
    assert session.token is None
    assert store.is_empty()
    navigate.assert_called_once_with("/")

    # idempotent
    controller.logout()
    assert controller.session.authenticated is False
    assert store.is_empty()


def test_sync_with_store_drops_cleared_credentials(store):
    store.save("tok", {"id": 2, "username": "u", "email": "", "role": "USER"})
    controller = _controller(store)
    controller.restore()
    assert controller.session.authenticated is True

    store.clear()
    assert controller.sync_with_store().authenticated is False


@patch(
    "use_cases.session_controller.auth_service.login",
    return_value={"token": "abc", "userId": 1, "username": "admin", "role": "ADMIN"},
)
def test_admin_login_populates_session(_mock_login, store):
    controller = _controller(store)
    controller.restore()

    session = controller.login("admin", "admin123")

    assert session.authenticated is True
    assert session.token == "abc"
    assert session.user.id == 1
    assert session.user.username == "admin"
    assert session.user.role == "ADMIN"
