"""Route access orchestration (application layer)."""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from use_cases import route_guard
from use_cases.route_guard import GuardAction, Route
from use_cases.session_models import Session

log = logging.getLogger(__name__)

AuthFlowStatus = Literal["CONTINUE", "REDIRECT", "WAIT"]


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for route access orchestration."""

    status: AuthFlowStatus
    reason: str
    route: Route
    redirect_to: Optional[str] = None
    user_id: Optional[int] = None


def resolve_access(session: Session, path: Optional[str]) -> AuthFlowResult:
    """Map the requested path to a route and turn the guard decision into a control-flow status."""
    route = route_guard.resolve_route(path)
    action = route_guard.guard_route(session, route)
    user_id = session.user.id if session.user is not None else None

    if action == GuardAction.RENDER:
        return AuthFlowResult(status="CONTINUE", reason=action.value, route=route, user_id=user_id)

    if action == GuardAction.RENDER_LOADING:
        return AuthFlowResult(status="WAIT", reason=action.value, route=route)

    target = route_guard.REDIRECT_TARGETS[action]
    if action == GuardAction.REDIRECT_FORBIDDEN:
        log.warning(f"User {user_id} lacks role {route.required_role} for {route.path}")
    return AuthFlowResult(
        status="REDIRECT",
        reason=action.value,
        route=route,
        redirect_to=target,
        user_id=user_id,
    )
