"""TaskList entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and ``Z`` suffix.

    Examples:
        >>> utc_timestamp(datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc))
        '2024-05-01T12:30:00.000Z'
    """
    moment = now or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


@dataclass(frozen=True)
class TaskList:
    """Named collection of todos shared by its member users.

    Invariants:
    - created_at is set once at creation and never changes
    - user_ids keeps insertion order; the first id is the creator
    - user_ids holds identifiers only (weak references to users)

    Examples:
        >>> tl = TaskList(id="1", title="Groceries",
        ...               created_at="2024-05-01T12:30:00.000Z", user_ids=["u1"])
        >>> tl.has_member("u1")
        True
        >>> tl.progress
        0.0
    """

    id: str
    title: str
    created_at: str
    user_ids: List[str] = field(default_factory=list)

    @property
    def progress(self) -> float:
        """Completion ratio. Always 0, todos are not tracked."""
        return 0.0

    def has_member(self, user_id: str) -> bool:
        """Membership test on the string form of identifiers."""
        return any(str(member) == str(user_id) for member in self.user_ids)
