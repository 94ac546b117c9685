"""JWT token provider (HS256, shared secret)."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError as JWTError

from domain.user.auth.claims import AuthClaim
from domain.user.auth.ports.auth_provider import ITokenProvider, InvalidTokenError
from infrastructure.config import get_secret_key, get_token_ttl_seconds

ALGORITHM = "HS256"


class JwtTokenProvider(ITokenProvider):
    """Signs and verifies compact JWTs carrying ``{id, email, username, exp}``.

    Environment Variables:
    - SECRET_KEY: signing secret (required when ``secret`` is not passed)
    - TOKEN_TTL_SECONDS: token lifetime (default: 3600)

    Examples:
        >>> provider = JwtTokenProvider(secret="s3cret")
        >>> token = provider.issue_token(AuthClaim("u-1", "ann", "ann@example.com"))
        >>> provider.verify_token(token).id
        'u-1'
    """

    def __init__(self, secret: Optional[str] = None, ttl_seconds: Optional[int] = None):
        """Initialize provider.

        Raises:
            ValueError: If no secret is configured
        """
        self.secret = secret or get_secret_key()
        self.ttl = timedelta(
            seconds=ttl_seconds if ttl_seconds is not None else get_token_ttl_seconds()
        )

    def issue_token(self, claim: AuthClaim) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "id": claim.id,
            "email": claim.email,
            "username": claim.username,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> AuthClaim:
        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self.secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp"]},
            )
            return AuthClaim.from_payload(payload)

        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e
        except KeyError as e:
            raise InvalidTokenError(f"Missing claim {e}") from e
