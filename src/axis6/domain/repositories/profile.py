"""Profile repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.profile import Profile


class ProfileRepository(Protocol):
    """Repository for account owners."""

    def get(self, user_id: str) -> Optional[Profile]:
        ...

    def ensure(self, user_id: str, name: str = "") -> Profile:
        """Return the profile, creating it on first sight."""
        ...
