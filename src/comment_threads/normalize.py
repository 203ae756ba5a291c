"""Normalise raw comment nodes into a uniform reply tree.

The upstream source encodes "this comment has replies" in three different
ways, and a reply may use a different encoding than its parent:

* ``feedback.replies.nodes`` (the standard graph payload)
* ``replies.nodes`` (simplified payloads)
* ``feedback.replies_connection.edges[].node`` (connection/edge payloads)

:func:`normalize` collapses all of them into :class:`CommentNode` trees.
"""
from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

__all__ = [
    "UNKNOWN_AUTHOR",
    "CommentNode",
    "ReplySource",
    "count_reply_sources",
    "normalize",
    "normalize_node",
    "resolve_reply_source",
]

UNKNOWN_AUTHOR = "Unknown"


class ReplySource(enum.Enum):
    """Where a raw node keeps its replies, in resolution priority order."""

    FEEDBACK_NODES = "feedback.replies.nodes"
    REPLY_NODES = "replies.nodes"
    EDGE_NODES = "feedback.replies_connection.edges"
    NONE = "none"


@dataclass(frozen=True)
class CommentNode:
    id: Any
    author: str
    text: str
    replies: Tuple["CommentNode", ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "text": self.text,
            "replies": [reply.to_dict() for reply in self.replies],
        }


def _dig(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def resolve_reply_source(node: Any) -> Tuple[ReplySource, List[Any]]:
    """Return the first reply encoding present on ``node`` and its raw replies.

    Only one branch fires: a present-but-empty ``feedback.replies.nodes``
    still shadows ``replies.nodes``.
    """

    nodes = _dig(node, "feedback", "replies", "nodes")
    if nodes is not None:
        return ReplySource.FEEDBACK_NODES, _as_list(nodes)

    nodes = _dig(node, "replies", "nodes")
    if nodes is not None:
        return ReplySource.REPLY_NODES, _as_list(nodes)

    edges = _dig(node, "feedback", "replies_connection", "edges")
    if edges is not None:
        return ReplySource.EDGE_NODES, [_dig(edge, "node") for edge in _as_list(edges)]

    return ReplySource.NONE, []


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _author_label(node: Any) -> str:
    name = _dig(node, "author", "name")
    if name is None:
        return UNKNOWN_AUTHOR
    return name if isinstance(name, str) else str(name)


def _body_text(node: Any) -> str:
    text = _dig(node, "body", "text")
    if text is None:
        text = _dig(node, "message", "text")
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


def normalize_node(node: Any) -> CommentNode:
    """Normalise a single raw node and, recursively, its replies."""

    _, raw_replies = resolve_reply_source(node)
    replies = normalize(raw_replies) if raw_replies else ()
    return CommentNode(
        id=_dig(node, "id"),
        author=_author_label(node),
        text=_body_text(node),
        replies=replies,
    )


def normalize(collection: Optional[Iterable[Any]]) -> Tuple[CommentNode, ...]:
    """Normalise a comment collection, preserving source order.

    Anything other than a list yields an empty tuple.
    """

    if not isinstance(collection, list):
        return ()
    return tuple(normalize_node(node) for node in collection)


def count_reply_sources(collection: Optional[Iterable[Any]]) -> Counter:
    """Tally which reply encoding each raw node uses, across every depth."""

    counts: Counter = Counter()
    pending = list(collection) if isinstance(collection, list) else []
    while pending:
        node = pending.pop()
        source, raw_replies = resolve_reply_source(node)
        counts[source] += 1
        pending.extend(raw_replies)
    return counts
