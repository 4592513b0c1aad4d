from infrastructure.http.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NetworkError,
)
from use_cases import effects


def test_authentication_error_navigates_to_login():
    effect = effects.handle_api_error(AuthenticationError("expired", status=401, operation="get_all_movies"))
    assert effect.message == effects.SESSION_EXPIRED_MESSAGE
    assert effect.navigation == effects.NavigationCommand("/login", hard=True)


def test_authorization_error_stays_local():
    effect = effects.handle_api_error(AuthorizationError("Forbidden", status=403))
    assert effect.navigation is None
    assert effect.message == effects.FORBIDDEN_MESSAGE


def test_network_error_stays_local():
    effect = effects.handle_api_error(NetworkError("timeout"))
    assert effect.navigation is None
    assert effect.message == effects.NETWORK_MESSAGE


def test_domain_error_shows_server_text():
    effect = effects.handle_api_error(DomainError("Movie not found", status=404))
    assert effect == effects.ErrorEffect("Movie not found")
