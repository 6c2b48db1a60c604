from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .catalog.models import FacetOption, Item
from .engine.session import DirectorySession


class ItemOut(BaseModel):
    id: int | str
    title: str
    link: str
    regions: list[str]
    thumbnail: str | bool
    excerpt: str
    categories: list[FacetOption]
    priority: int
    score: int

    @classmethod
    def from_item(cls, item: Item) -> ItemOut:
        return cls.model_validate(item.model_dump(exclude={"active", "platform"}))


class FacetsResponse(BaseModel):
    regions: list[FacetOption]
    categories: list[FacetOption]
    total_items: int


class DirectoryView(BaseModel):
    items: list[ItemOut]
    query: str
    page_size: int
    active_count: int
    total_items: int
    has_more: bool
    any_active: bool
    any_regions: bool
    any_categories: bool
    all_regions_selected: bool
    all_categories_selected: bool
    selected_regions: list[str]
    selected_categories: list[str]


class ToggleRequest(BaseModel):
    query: str = ""
    facet: Literal["region", "category"]
    slug: str = Field(..., min_length=1)


def build_view(session: DirectorySession) -> DirectoryView:
    return DirectoryView(
        items=[ItemOut.from_item(item) for item in session.visible_items],
        query=session.url_sync.canonical_query(),
        page_size=session.window.page_size,
        active_count=session.active_count,
        total_items=session.total_items,
        has_more=session.has_more,
        any_active=session.any_active,
        any_regions=session.any_regions,
        any_categories=session.any_categories,
        all_regions_selected=session.all_regions_selected,
        all_categories_selected=session.all_categories_selected,
        selected_regions=sorted(session.selection.selected_regions),
        selected_categories=sorted(session.selection.selected_categories),
    )
