"""bcrypt password hasher."""

import asyncio
from typing import Optional

import bcrypt

from domain.user.auth.ports.auth_provider import IPasswordHasher
from infrastructure.config import get_bcrypt_rounds

# bcrypt ignores (and recent releases reject) input beyond 72 bytes.
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt with a configurable cost factor.

    The default cost (12) takes roughly a few hundred milliseconds; the work
    runs in a worker thread so the event loop keeps serving other requests.
    Tests pass ``rounds=4`` (bcrypt's minimum).
    """

    def __init__(self, rounds: Optional[int] = None) -> None:
        self.rounds = rounds if rounds is not None else get_bcrypt_rounds()

    async def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, _encode(password), salt)
        return hashed.decode("utf-8")

    async def verify(self, password: str, password_hash: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, _encode(password), password_hash.encode("utf-8")
            )
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
