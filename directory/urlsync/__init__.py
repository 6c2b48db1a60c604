"""
Query-string synchronisation.

Responsibilities:
- Encode the facet selection into ``region``/``category`` parameters.
- Decode those parameters back into a selection, tolerating bad input.
- Push a new history entry after each user change and re-read the
  selection on back/forward navigation.
"""
