"""Application layer contracts for orchestrating high-level flows."""

from .auth_flow import AuthFlowResult, AuthFlowStatus, resolve_access
from .effects import ErrorEffect, NavigationCommand, handle_api_error
from .rating_display import StarBreakdown, format_average, render_stars, star_breakdown
from .route_guard import ROUTES, GuardAction, Route, decide, guard_route, resolve_route
from .session_controller import LoginError, SessionController
from .session_models import Role, Session, UserProfile, is_admin, profile_from_login_payload
from .validation import ValidationError

__all__ = [
    "AuthFlowResult",
    "AuthFlowStatus",
    "ErrorEffect",
    "GuardAction",
    "LoginError",
    "NavigationCommand",
    "ROUTES",
    "Role",
    "Route",
    "Session",
    "SessionController",
    "StarBreakdown",
    "UserProfile",
    "ValidationError",
    "decide",
    "format_average",
    "guard_route",
    "handle_api_error",
    "is_admin",
    "profile_from_login_payload",
    "render_stars",
    "resolve_route",
    "resolve_access",
    "star_breakdown",
]
