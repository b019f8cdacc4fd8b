"""Category repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.category import AxisCategory


class CategoryRepository(Protocol):
    """Repository for the fixed life-balance categories."""

    def get_by_id(self, category_id: int) -> Optional[AxisCategory]:
        """Retrieve a category by ID."""
        ...

    def get_by_slug(self, slug: str) -> Optional[AxisCategory]:
        """Retrieve a category by slug."""
        ...

    def list_all(self) -> list[AxisCategory]:
        """List all categories ordered by position."""
        ...

    def ensure_defaults(self) -> list[AxisCategory]:
        """Insert any missing default category and return the full set."""
        ...
