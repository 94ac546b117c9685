"""Request authentication guard.

Turns the ``Authorization`` header of a request into a verified
``AuthClaim`` or fails with a typed error.
"""

import logging
from typing import Optional

from domain.shared.errors import DomainError
from domain.user.auth.claims import AuthClaim
from domain.user.auth.ports.auth_provider import ITokenProvider, InvalidTokenError

logger = logging.getLogger(__name__)

BEARER_FORMAT_MESSAGE = "Authentication token must be 'Bearer <token>'"


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Extract Bearer token from Authorization header.

    Examples:
        >>> extract_bearer_token("Bearer eyJ...")
        'eyJ...'
        >>> extract_bearer_token("eyJ...") is None  # Missing Bearer
        True
        >>> extract_bearer_token("bearer eyJ...") is None  # Scheme is case-sensitive
        True
    """
    if not auth_header:
        return None

    parts = auth_header.split(" ")

    if len(parts) != 2:
        return None

    scheme, token = parts

    if scheme != "Bearer" or not token:
        return None

    return token


def check_auth(auth_header: Optional[str], token_provider: ITokenProvider) -> AuthClaim:
    """Verify the bearer token of a request.

    Raises:
        DomainError: AUTHENTICATION_REQUIRED if the header is missing or not
            ``Bearer <token>``; INVALID_TOKEN if verification fails
    """
    token = extract_bearer_token(auth_header)
    if not token:
        logger.warning("Rejected request without bearer token")
        raise DomainError.authentication_required(BEARER_FORMAT_MESSAGE)

    try:
        return token_provider.verify_token(token)
    except InvalidTokenError as e:
        logger.warning("Rejected invalid token", extra={"reason": e.reason})
        raise DomainError.invalid_token() from e
