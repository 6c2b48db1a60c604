"""
Filtering engine.

Responsibilities:
- Track the user's region/category/platform selection.
- Recompute every item's active flag and relevance score on each change.
- Rank active items by sponsor priority then relevance, and expose a
  growing pagination window over them.
"""
