"""Error taxonomy shared by every layer.

A single exception type carries a closed ``ErrorKind`` tag plus a
structured ``details`` payload (field name -> message). The GraphQL layer
maps the tag onto the ``extensions.code`` of the response error.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to API callers."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    AUTHORIZATION_DENIED = "AUTHORIZATION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


class DomainError(Exception):
    """Typed application error.

    Attributes:
        kind: Tag from ``ErrorKind``
        message: Human readable summary
        details: Per-field messages (may be empty)

    Examples:
        >>> err = DomainError.not_found("Post not found")
        >>> err.kind
        <ErrorKind.NOT_FOUND: 'NOT_FOUND'>
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: Optional[Dict[str, str]] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.details: Dict[str, str] = dict(details or {})
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DomainError({self.kind.value}, {self.message!r}, {self.details!r})"

    @classmethod
    def validation_failed(
        cls, message: str, details: Optional[Dict[str, str]] = None
    ) -> "DomainError":
        return cls(ErrorKind.VALIDATION_FAILED, message, details)

    @classmethod
    def authentication_required(cls, message: str) -> "DomainError":
        return cls(ErrorKind.AUTHENTICATION_REQUIRED, message)

    @classmethod
    def invalid_token(cls, message: str = "Invalid/Expired token") -> "DomainError":
        return cls(ErrorKind.INVALID_TOKEN, message)

    @classmethod
    def authorization_denied(cls, message: str = "Action not allowed") -> "DomainError":
        return cls(ErrorKind.AUTHORIZATION_DENIED, message)

    @classmethod
    def not_found(cls, message: str) -> "DomainError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str, details: Optional[Dict[str, str]] = None) -> "DomainError":
        return cls(ErrorKind.CONFLICT, message, details)
