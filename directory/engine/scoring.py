"""
Facet matching and relevance scoring.

Matching is AND across facet dimensions and OR within a dimension. An
empty selection for a dimension matches every item. The relevance score
is the number of matched facet values across both dimensions and is set
on every item, active or not.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable

from ..catalog.models import Item
from ..config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBreakdown:
    title: str
    region_score: int
    category_score: int
    total: int
    matched_regions: tuple[str, ...]
    matched_categories: tuple[str, ...]

    def as_trace(self) -> dict:
        return {
            "title": self.title,
            "region_score": self.region_score,
            "category_score": self.category_score,
            "total": self.total,
            "matched_regions": ", ".join(self.matched_regions) or "(all)",
            "matched_categories": ", ".join(self.matched_categories) or "(all)",
        }


def score_item(
    item: Item,
    selected_regions: AbstractSet[str],
    selected_categories: AbstractSet[str],
) -> ScoreBreakdown:
    """Set ``item.active`` and ``item.score`` from the current selection."""
    matched_regions = (
        tuple(r for r in item.region_slugs if r in selected_regions)
        if selected_regions
        else ()
    )
    matched_categories = (
        tuple(c for c in item.category_slugs if c in selected_categories)
        if selected_categories
        else ()
    )

    region_match = not selected_regions or bool(matched_regions)
    category_match = not selected_categories or bool(matched_categories)

    item.active = region_match and category_match
    item.score = len(matched_regions) + len(matched_categories)

    return ScoreBreakdown(
        title=item.title,
        region_score=len(matched_regions),
        category_score=len(matched_categories),
        total=item.score,
        matched_regions=matched_regions,
        matched_categories=matched_categories,
    )


def apply_filters(
    items: Iterable[Item],
    selected_regions: AbstractSet[str],
    selected_categories: AbstractSet[str],
    config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG,
) -> list[ScoreBreakdown]:
    """Rescore every item and return the breakdowns of the active ones."""
    breakdowns: list[ScoreBreakdown] = []
    for item in items:
        breakdown = score_item(item, selected_regions, selected_categories)
        if item.active:
            breakdowns.append(breakdown)

    level = logging.INFO if config.trace_scoring else logging.DEBUG
    if logger.isEnabledFor(level):
        logger.log(
            level,
            "Filter scoring: %d items matched (regions=%s, categories=%s)",
            len(breakdowns), sorted(selected_regions), sorted(selected_categories),
        )
        for breakdown in breakdowns:
            trace = breakdown.as_trace()
            logger.log(level, "Score breakdown: %s", trace, extra={"score_breakdown": trace})

    return breakdowns
