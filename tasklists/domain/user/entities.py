"""User entity."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class User:
    """Registered user.

    ``id`` is the string form of the identifier generated by the
    persistence layer. ``password_hash`` never leaves the service.

    Examples:
        >>> user = User(id="652f...", name="Ada", email="ada@example.com",
        ...             password_hash="$2b$10$...")
        >>> user.avatar is None
        True
    """

    id: str
    name: str
    email: str
    password_hash: str = field(repr=False)
    avatar: Optional[str] = None
