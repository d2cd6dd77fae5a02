"""Domain entity representing a tracked health profile."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Profile:
    """A person whose health data is tracked by an account owner."""

    id: UUID
    owner_user_id: str
    name: str
    type: str = "owner"
    created_at: datetime | None = None

    def is_owned_by(self, owner_user_id: str) -> bool:
        """Return ``True`` when ``owner_user_id`` owns this profile."""

        return self.owner_user_id == owner_user_id


__all__ = ["Profile"]
