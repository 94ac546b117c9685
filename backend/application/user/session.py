"""Authenticated session returned by register and login."""

from dataclasses import dataclass

from domain.user.auth.claims import AuthClaim
from domain.user.auth.ports.auth_provider import ITokenProvider
from domain.user.core.entities.user import User


@dataclass(frozen=True)
class UserSession:
    """User fields plus a freshly issued bearer token."""

    user: User
    token: str


def open_session(user: User, token_provider: ITokenProvider) -> UserSession:
    claim = AuthClaim(id=user.id, username=user.username, email=user.email)
    return UserSession(user=user, token=token_provider.issue_token(claim))
