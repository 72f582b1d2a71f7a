"""Argon2 credential hasher."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from onboard.domain.service.credential import CredentialHasher


class Argon2CredentialHasher(CredentialHasher):
    """Password hashing with argon2id (library defaults)."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._hasher.verify(hashed, password)
        except (VerificationError, InvalidHashError):
            return False
