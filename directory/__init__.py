"""
Filterable catalog directory.

Responsibilities:
- Hold the catalog items and the region/category facet vocabularies.
- Match, score, rank and paginate items against the current facet selection.
- Keep the facet selection in sync with the page's query string.
"""
