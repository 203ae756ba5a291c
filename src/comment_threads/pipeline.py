"""Load a document, structure its comment threads, and write the result."""
from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

from .errors import UserVisibleError
from .locator import find_comment_collection
from .normalize import CommentNode, count_reply_sources, normalize
from .roots import select_roots

__all__ = [
    "StructureResult",
    "load_document",
    "render_threads",
    "structure_comments",
    "structure_comments_file",
    "write_output",
]

PathLike = Union[str, Path]


@dataclass(frozen=True)
class StructureResult:
    """Outcome of one pass over a document."""

    found: bool
    forest: Tuple[CommentNode, ...] = ()
    threads: Tuple[CommentNode, ...] = ()
    reply_sources: Counter = field(default_factory=Counter)

    def to_json(self) -> List[dict]:
        return [thread.to_dict() for thread in self.threads]


def _reject_constant(token: str) -> Any:
    raise UserVisibleError(f"JSON input contains the non-standard constant {token}.")


def load_document(path: PathLike) -> Any:
    """Read and parse a JSON document, surfacing friendly errors.

    ``NaN`` and ``Infinity`` are rejected so that the output stays valid JSON.
    """

    source = Path(path)
    if not source.is_file():
        raise UserVisibleError(f"Input file '{source}' was not found.")
    try:
        with source.open("r", encoding="utf-8") as handle:
            return json.load(handle, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise UserVisibleError(
            f"Input file '{source}' is not valid JSON (line {exc.lineno} column {exc.colno})."
        ) from exc
    except UnicodeDecodeError as exc:
        raise UserVisibleError(f"Input file '{source}' is not UTF-8 encoded text.") from exc
    except ValueError as exc:
        raise UserVisibleError(f"Input file '{source}' could not be parsed: {exc}") from exc
    except OSError as exc:
        raise UserVisibleError(f"Input file '{source}' could not be read: {exc}") from exc


def structure_comments(document: Any) -> StructureResult:
    """Locate, normalise, and deduplicate the comment threads in ``document``."""

    collection = find_comment_collection(document)
    if collection is None:
        return StructureResult(found=False)
    forest = normalize(collection)
    return StructureResult(
        found=True,
        forest=forest,
        threads=select_roots(forest),
        reply_sources=count_reply_sources(collection),
    )


def render_threads(threads: Iterable[CommentNode], *, indent: int = 2) -> str:
    payload = [thread.to_dict() for thread in threads]
    return json.dumps(payload, ensure_ascii=False, indent=indent, allow_nan=False)


def write_output(path: PathLike, text: str) -> Path:
    destination = Path(path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise UserVisibleError(f"Output file '{destination}' could not be written: {exc}") from exc
    return destination


def structure_comments_file(
    source: PathLike,
    destination: PathLike,
    *,
    indent: int = 2,
) -> StructureResult:
    """Run the whole pipeline from ``source`` to ``destination``.

    Nothing is written when the source cannot be loaded. A document without a
    comment collection still produces an empty array.
    """

    document = load_document(source)
    result = structure_comments(document)
    write_output(destination, render_threads(result.threads, indent=indent))
    return result
