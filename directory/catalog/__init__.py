"""
Catalog store.

Responsibilities:
- Define the item and facet-option schema.
- Load the catalog (items plus region/category vocabularies) from JSON.
- Serve the catalog read-only to the filtering engine.
"""
