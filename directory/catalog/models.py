from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FacetOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    slug: str


class Item(BaseModel):
    id: int | str
    title: str
    link: str = "#"
    regions: list[str] = Field(default_factory=list)
    thumbnail: str | bool = False
    excerpt: str = ""
    categories: list[FacetOption] = Field(default_factory=list)
    priority: int = 0
    platform: list[str] = Field(default_factory=list)

    # Owned by the scoring engine
    active: bool = False
    score: int = 0

    @field_validator("regions", "platform", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, value: Any) -> Any:
        return value if value is not None else []

    @field_validator("excerpt", mode="before")
    @classmethod
    def _coerce_excerpt(cls, value: Any) -> Any:
        return value if value is not None else ""

    @field_validator("priority", mode="before")
    @classmethod
    def _coerce_priority(cls, value: Any) -> Any:
        return value if value else 0

    @property
    def region_slugs(self) -> list[str]:
        return list(dict.fromkeys(r.strip().lower() for r in self.regions))

    @property
    def category_slugs(self) -> list[str]:
        return list(dict.fromkeys(c.slug.strip().lower() for c in self.categories))


class CatalogData(BaseModel):
    regions: list[FacetOption] = Field(default_factory=list)
    categories: list[FacetOption] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)
