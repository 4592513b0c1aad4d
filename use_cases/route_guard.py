"""Route table and the access decision for each route."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from use_cases.session_models import Role, Session


class GuardAction(str, Enum):
    RENDER = "render"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_FORBIDDEN = "redirect_forbidden"
    RENDER_LOADING = "render_loading"


def decide(session: Session, required_role: Optional[Role] = None) -> GuardAction:
    """Pure decision; the caller performs any navigation the action implies."""
    if session.loading:
        return GuardAction.RENDER_LOADING
    if not session.authenticated:
        return GuardAction.REDIRECT_LOGIN
    if required_role and (session.user is None or session.user.role != required_role):
        return GuardAction.REDIRECT_FORBIDDEN
    return GuardAction.RENDER


@dataclass(frozen=True)
class Route:
    path: str
    title: str
    protected: bool = False
    required_role: Optional[Role] = None


HOME = Route("/", "Home")
LOGIN = Route("/login", "Login")
FORBIDDEN = Route("/forbidden", "Forbidden")
MOVIES = Route("/movies", "Movies", protected=True)
ADMIN = Route("/admin", "Movie management", protected=True, required_role="ADMIN")
NOT_FOUND = Route("*", "Page not found")

ROUTES = {route.path: route for route in (HOME, LOGIN, FORBIDDEN, MOVIES, ADMIN)}

REDIRECT_TARGETS = {
    GuardAction.REDIRECT_LOGIN: LOGIN.path,
    GuardAction.REDIRECT_FORBIDDEN: FORBIDDEN.path,
}


def normalize_path(path: Optional[str]) -> str:
    if not path:
        return HOME.path
    path = "/" + str(path).strip().strip("/")
    return path


def resolve_route(path: Optional[str]) -> Route:
    return ROUTES.get(normalize_path(path), NOT_FOUND)


def guard_route(session: Session, route: Route) -> GuardAction:
    if not route.protected:
        return GuardAction.RENDER
    return decide(session, route.required_role)
