"""Authentication helpers"""
import hmac
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from QueryRepair.Exception.ApiError import UnauthorizedError
from QueryRepair.Utility.env import get_site_admin_tokens


@dataclass(frozen=True)
class Actor:
    uid: Optional[str] = None
    site_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.uid is not None


def get_request_token(headers: Mapping[str, str]) -> Optional[str]:
    value = headers.get("Authorization") or ""
    scheme, _, token = value.partition(" ")
    if scheme.lower() not in ("token", "bearer") or not token.strip():
        return None
    return token.strip()


def resolve_actor(headers: Mapping[str, str], admin_tokens: Optional[Iterable[str]] = None) -> Actor:
    token = get_request_token(headers)
    if token is None:
        return Actor()
    if admin_tokens is None:
        admin_tokens = get_site_admin_tokens()
    is_admin = any(hmac.compare_digest(token, t) for t in admin_tokens)
    # The token itself is a credential; identify the caller by a short prefix only.
    return Actor(uid=f"token:{token[:4]}", site_admin=is_admin)


def check_current_user_is_site_admin(actor: Actor) -> None:
    if not actor.site_admin:
        raise UnauthorizedError()
