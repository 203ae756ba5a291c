"""Select root threads from a normalised comment forest.

The upstream source sometimes flattens a reply into the top-level collection
while also nesting it under its parent. Top-level entries whose id appears as
a reply anywhere in the forest are dropped; nested replies are left alone.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, Set, Tuple

from .normalize import CommentNode

__all__ = ["collect_child_ids", "identity_key", "select_roots"]


def _canonical(value: Any) -> Any:
    # JSON has one number type: 1 and 1.0 are the same id. Booleans stay apart.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_canonical(item) for item in value]
    if isinstance(value, dict):
        return {key: _canonical(child) for key, child in value.items()}
    return value


def identity_key(comment_id: Any) -> str:
    """Return a hashable key comparing ids by JSON value equality."""

    return json.dumps(_canonical(comment_id), sort_keys=True, ensure_ascii=False)


def collect_child_ids(forest: Iterable[CommentNode]) -> Set[str]:
    """Return identity keys of every node that is some other node's reply."""

    child_ids: Set[str] = set()

    def _walk(nodes: Iterable[CommentNode]) -> None:
        for node in nodes:
            for reply in node.replies:
                child_ids.add(identity_key(reply.id))
            _walk(node.replies)

    _walk(forest)
    return child_ids


def select_roots(forest: Iterable[CommentNode]) -> Tuple[CommentNode, ...]:
    """Keep top-level nodes that never occur as a reply, in original order."""

    top_level = tuple(forest)
    child_ids = collect_child_ids(top_level)
    return tuple(node for node in top_level if identity_key(node.id) not in child_ids)
