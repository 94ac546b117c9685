"""User entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
import uuid


@dataclass
class User:
    """Registered account.

    ``password`` always holds a one-way hash, never the plain text.

    Invariants:
    - username is unique (enforced by the repository)
    - created_at is timezone-aware

    Examples:
        >>> user = User.create("ann", "ann@example.com", "$2b$12$...")
        >>> user.username
        'ann'
    """

    id: str
    username: str
    email: str
    password: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (use UTC)")

    @staticmethod
    def create(username: str, email: str, password_hash: str) -> "User":
        """Factory method for a new user with server-assigned id and timestamp."""
        return User(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password=password_hash,
            created_at=datetime.now(timezone.utc),
        )
