"""Credential hashing contract."""

from abc import ABC, abstractmethod


class CredentialHasher(ABC):
    """Opaque password hashing primitive."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        pass

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash."""
        pass
