from __future__ import annotations

from typing import AbstractSet, Sequence
from urllib.parse import parse_qsl, urlencode

REGION_PARAM = "region"
CATEGORY_PARAM = "category"
ALL_SENTINEL = "all"
LEGACY_PARAMS = ("region[]", "category[]")


def _parse(query: str) -> list[tuple[str, str]]:
    return parse_qsl(query.lstrip("?"), keep_blank_values=True, errors="replace")


def encode_facet(selected: AbstractSet[str], vocabulary: Sequence[str]) -> str | None:
    """Return the parameter value for one facet, or ``None`` to omit it."""
    if len(selected) == len(vocabulary):
        return ALL_SENTINEL
    if not selected:
        return None
    # Known slugs in vocabulary order, then anything unrecognised
    known = [slug for slug in vocabulary if slug in selected]
    unknown = sorted(slug for slug in selected if slug not in vocabulary)
    return ",".join(known + unknown)


def decode_facet(raw: str | None, vocabulary: Sequence[str]) -> set[str]:
    if not raw:
        return set()
    if raw == ALL_SENTINEL:
        return set(vocabulary)
    return {part.strip() for part in raw.split(",") if part.strip()}


def encode_query(
    query: str,
    selected_regions: AbstractSet[str],
    selected_categories: AbstractSet[str],
    region_vocabulary: Sequence[str],
    category_vocabulary: Sequence[str],
) -> str:
    """Rewrite ``query`` with the current selection.

    Unrelated parameters are kept in place, legacy array-style parameters
    are dropped, and ``region``/``category`` are set or removed.
    """
    pairs = [(k, v) for k, v in _parse(query) if k not in LEGACY_PARAMS]

    updates = {
        REGION_PARAM: encode_facet(selected_regions, region_vocabulary),
        CATEGORY_PARAM: encode_facet(selected_categories, category_vocabulary),
    }
    for name, value in updates.items():
        pairs = _set_param(pairs, name, value)

    return urlencode(pairs, safe=",")


def _set_param(pairs: list[tuple[str, str]], name: str, value: str | None) -> list[tuple[str, str]]:
    result: list[tuple[str, str]] = []
    placed = False
    for key, current in pairs:
        if key != name:
            result.append((key, current))
        elif value is not None and not placed:
            result.append((key, value))
            placed = True
    if value is not None and not placed:
        result.append((name, value))
    return result


def decode_query(
    query: str,
    region_vocabulary: Sequence[str],
    category_vocabulary: Sequence[str],
) -> tuple[set[str], set[str]]:
    """Read the region and category selections from a query string.

    Only the first occurrence of each parameter counts. Unknown slugs are
    returned as-is; they simply never match an item.
    """
    first: dict[str, str] = {}
    for key, value in _parse(query):
        first.setdefault(key, value)
    return (
        decode_facet(first.get(REGION_PARAM), region_vocabulary),
        decode_facet(first.get(CATEGORY_PARAM), category_vocabulary),
    )
