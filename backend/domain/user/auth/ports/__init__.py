from domain.user.auth.ports.auth_provider import (
    IPasswordHasher,
    ITokenProvider,
    InvalidTokenError,
)

__all__ = ["IPasswordHasher", "ITokenProvider", "InvalidTokenError"]
