"""Heuristic search for the comment collection inside an unknown JSON document.

Upstream exports do not keep the comments in a fixed place: depending on the
page the array may sit under ``nodes``, ``comments``, a ``feedback`` block, or
several levels below unrelated wrappers. The locator walks the document depth
first and returns the first array whose leading element looks like a comment.
"""
from __future__ import annotations

import re
from typing import Any, Iterator, List, Optional, Tuple

__all__ = [
    "COMMENT_MARKER_KEYS",
    "POST_MARKER_KEY",
    "PRIORITY_KEYS",
    "enumeration_order",
    "find_comment_collection",
    "looks_like_comment",
]

PRIORITY_KEYS = ("nodes", "comments", "feedback")
COMMENT_MARKER_KEYS = ("body", "author", "message")
# Post/story objects carry ``id`` and ``message`` too.
POST_MARKER_KEY = "comet_sections"

_INDEX_KEY_RE = re.compile(r"0|[1-9][0-9]*")
_MAX_INDEX_KEY = 2**32 - 2


def _is_index_key(key: Any) -> bool:
    return isinstance(key, str) and bool(_INDEX_KEY_RE.fullmatch(key)) and int(key) <= _MAX_INDEX_KEY


def enumeration_order(mapping: dict) -> Iterator[Tuple[Any, Any]]:
    """Yield items in JavaScript property order: array-index keys ascending, then insertion order."""

    index_keys = sorted((key for key in mapping if _is_index_key(key)), key=int)
    for key in index_keys:
        yield key, mapping[key]
    for key, child in mapping.items():
        if not _is_index_key(key):
            yield key, child


def looks_like_comment(sample: Any) -> bool:
    """Return True when ``sample`` has the keys of a comment node."""

    if not isinstance(sample, dict):
        return False
    if "id" not in sample or POST_MARKER_KEY in sample:
        return False
    return any(key in sample for key in COMMENT_MARKER_KEYS)


def find_comment_collection(value: Any) -> Optional[List[Any]]:
    """Return the first comment-like array reachable from ``value``.

    Arrays are judged by their first element only. Objects are searched
    through :data:`PRIORITY_KEYS` before any other key, and remaining keys
    follow JavaScript property order (array-index keys ascending, then the
    rest in insertion order), so the result is deterministic for a given
    document. ``None`` means nothing matched.
    """

    if isinstance(value, list):
        if value and looks_like_comment(value[0]):
            return value
        for item in value:
            found = find_comment_collection(item)
            if found is not None:
                return found
        return None

    if isinstance(value, dict):
        for key in PRIORITY_KEYS:
            if key in value:
                found = find_comment_collection(value[key])
                if found is not None:
                    return found
        for key, child in enumeration_order(value):
            if key in PRIORITY_KEYS:
                continue
            found = find_comment_collection(child)
            if found is not None:
                return found
        return None

    return None
