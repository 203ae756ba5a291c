"""Locate, normalise, and deduplicate comment threads in post export JSON."""
from __future__ import annotations

from .errors import UserVisibleError
from .locator import find_comment_collection
from .normalize import CommentNode, ReplySource, count_reply_sources, normalize
from .pipeline import StructureResult, load_document, structure_comments, structure_comments_file
from .roots import collect_child_ids, select_roots

__all__ = [
    "CommentNode",
    "ReplySource",
    "StructureResult",
    "UserVisibleError",
    "collect_child_ids",
    "count_reply_sources",
    "find_comment_collection",
    "load_document",
    "normalize",
    "select_roots",
    "structure_comments",
    "structure_comments_file",
]
