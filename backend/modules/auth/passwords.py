"""
Password hashing with bcrypt.

Hashing and verification are CPU-bound, so both run in a worker thread
to keep the event loop responsive.
"""

import asyncio

import bcrypt

# bcrypt only uses the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode()[:MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Salted one-way bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash_sync(self, password: str) -> str:
        """Hash password with bcrypt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode()

    def verify_sync(self, password: str, password_hash: str) -> bool:
        """Verify password against a bcrypt hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except ValueError:
            # Stored value is not a bcrypt hash
            return False

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self.hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify_sync, password, password_hash)
