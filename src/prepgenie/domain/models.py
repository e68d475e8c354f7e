"""Domain models for PrepGenie."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserIdentity:
    """Represents an authenticated user."""

    id: UUID
    email: str | None = None
