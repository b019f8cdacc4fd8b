"""Life-balance category definitions."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class AxisCategory(SQLModel, table=True):
    """One of the six fixed axes a user checks in against."""

    __tablename__: ClassVar[str] = "axis6_categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=32)
    name_en: str = Field(nullable=False, max_length=64)
    name_es: str = Field(nullable=False, max_length=64)
    description_en: str = Field(default="", max_length=255)
    description_es: str = Field(default="", max_length=255)
    color: str = Field(nullable=False, max_length=7)
    icon: str = Field(nullable=False, max_length=32)
    position: int = Field(nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "name": {"en": self.name_en, "es": self.name_es},
            "description": {"en": self.description_en, "es": self.description_es},
            "color": self.color,
            "icon": self.icon,
            "position": self.position,
        }
