"""Identity claim carried by bearer tokens."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AuthClaim:
    """Decoded identity of the caller. Rebuilt on every request, never stored."""

    id: str
    username: str
    email: str

    @staticmethod
    def from_payload(payload: Dict[str, Any]) -> "AuthClaim":
        """Build claim from a decoded token payload.

        Raises:
            KeyError: If a required claim is missing
        """
        return AuthClaim(
            id=str(payload["id"]),
            username=str(payload["username"]),
            email=str(payload["email"]),
        )
