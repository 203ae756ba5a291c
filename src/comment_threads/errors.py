"""Exceptions surfaced by the comment thread tooling."""
from __future__ import annotations


class UserVisibleError(RuntimeError):
    """Raised when an actionable, friendly error message should be surfaced."""
