"""Resolver-side access to the auth guard."""

from typing import Any

from strawberry.types import Info

from application.auth.guard import check_auth
from domain.user.auth.claims import AuthClaim


def require_auth(info: Info[Any, Any]) -> AuthClaim:
    """Verify the caller's bearer token.

    Raises:
        DomainError: AUTHENTICATION_REQUIRED or INVALID_TOKEN
        RuntimeError: If token_provider is not in context
    """
    context = info.context
    token_provider = context.get("token_provider")
    if not token_provider:
        raise RuntimeError("token_provider not found in context")

    return check_auth(context.get("authorization"), token_provider)
