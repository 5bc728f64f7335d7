"""Credential and token service ports."""

from abc import ABC, abstractmethod
from typing import Optional


class IPasswordHasher(ABC):
    """One-way password hashing with a per-call random salt."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        pass

    @abstractmethod
    def verify(self, candidate: str, hashed: str) -> bool:
        """True iff ``candidate`` hashes to ``hashed`` under the same scheme."""
        pass


class ITokenService(ABC):
    """Issues and resolves signed bearer tokens."""

    @abstractmethod
    def issue(self, user_id: str) -> str:
        """Sign a token whose subject is ``user_id``."""
        pass

    @abstractmethod
    def resolve(self, token: str) -> Optional[str]:
        """Verify signature and expiry and return the subject.

        Returns:
            The encoded user id, or None when the token carries no subject

        Raises:
            InvalidTokenError: Malformed, expired or forged token
        """
        pass
