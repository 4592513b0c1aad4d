"""Session DTOs shared across application layers."""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Literal, Optional

Role = Literal["USER", "ADMIN"]
ROLES = ("USER", "ADMIN")


@dataclass(frozen=True)
class UserProfile:
    id: int
    username: str
    email: str
    role: Role

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Session:
    """Snapshot of the client session. authenticated implies user and token are set."""

    user: Optional[UserProfile] = None
    token: Optional[str] = None
    authenticated: bool = False
    loading: bool = False

    def with_credentials(self, user: UserProfile, token: str) -> "Session":
        return replace(self, user=user, token=token, authenticated=True)

    def cleared(self) -> "Session":
        return replace(self, user=None, token=None, authenticated=False)


def initial_session() -> Session:
    return Session(loading=True)


def is_admin(user: Optional[UserProfile]) -> bool:
    return user is not None and user.role == "ADMIN"


def _normalize_role(raw: Any) -> Role:
    role = str(raw or "").strip().upper()
    if role.startswith("ROLE_"):
        role = role[len("ROLE_"):]
    if role not in ROLES:
        raise ValueError(f"Unknown role: {raw!r}")
    return role  # type: ignore[return-value]


def profile_from_dict(data: Dict[str, Any]) -> UserProfile:
    """Build a profile from the persisted `{id, username, email, role}` record."""
    return UserProfile(
        id=int(data["id"]),
        username=str(data["username"]),
        email=str(data.get("email") or ""),
        role=_normalize_role(data.get("role")),
    )


def profile_from_login_payload(payload: Dict[str, Any], fallback_email: str = "") -> UserProfile:
    """
    Map the login response onto a profile.
    The login endpoint names the identifier `userId`; the register endpoint names it `id`.
    """
    raw_id = payload.get("userId")
    if raw_id is None:
        raw_id = payload.get("id")
    if raw_id is None:
        raise ValueError("Login response carries neither 'userId' nor 'id'")

    username = payload.get("username")
    if not username:
        raise ValueError("Login response carries no 'username'")

    return UserProfile(
        id=int(raw_id),
        username=str(username),
        email=str(payload.get("email") or fallback_email or ""),
        role=_normalize_role(payload.get("role")),
    )
