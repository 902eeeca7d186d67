"""
Argon2id password hashing adapter.
"""

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from app.domain.accounts.ports import PasswordHasher


class Argon2PasswordHasher(PasswordHasher):
    """PasswordHasher backed by argon2-cffi.

    Args:
        time_cost: Argon2 iterations. Lower it in tests only.
        memory_cost: Argon2 memory in KiB.
    """

    def __init__(self, time_cost: int = 3, memory_cost: int = 65536) -> None:
        self._hasher = Argon2Hasher(time_cost=time_cost, memory_cost=memory_cost)

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, InvalidHashError, VerificationError):
            return False
