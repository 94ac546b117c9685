"""Authentication provider ports (interfaces)."""

from abc import ABC, abstractmethod

from domain.user.auth.claims import AuthClaim


class ITokenProvider(ABC):
    """Issues and verifies signed bearer tokens.

    Examples:
        >>> token = provider.issue_token(AuthClaim("u-1", "ann", "ann@example.com"))
        >>> provider.verify_token(token).username
        'ann'
    """

    @abstractmethod
    def issue_token(self, claim: AuthClaim) -> str:
        """Sign a token embedding ``claim`` plus an expiry."""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> AuthClaim:
        """Verify signature and expiry and decode the claim.

        Raises:
            InvalidTokenError: Token is malformed, expired, badly signed,
                or lacks a required claim
        """
        pass


class IPasswordHasher(ABC):
    """One-way password hashing.

    Both operations are intentionally slow and are awaited so that
    implementations can move the work off the event loop.
    """

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Hash a plain text password."""
        pass

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
        pass


class InvalidTokenError(Exception):
    """Token verification failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"Invalid token: {reason}")
