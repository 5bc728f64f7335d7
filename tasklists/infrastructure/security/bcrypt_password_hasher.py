"""bcrypt implementation of the credential service."""

import bcrypt

from tasklists.domain.auth.ports import IPasswordHasher

# bcrypt only looks at the first 72 bytes of the secret
_BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """Hashes passwords with bcrypt and a fresh salt per call.

    Examples:
        >>> hasher = BcryptPasswordHasher(rounds=4)
        >>> hashed = hasher.hash("s3cret")
        >>> hasher.verify("s3cret", hashed)
        True
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, candidate: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(candidate), hashed.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            return False
