"""Structure the comment threads of a saved post export into clean JSON."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import UserVisibleError
from .normalize import ReplySource
from .pipeline import StructureResult, load_document, render_threads, structure_comments, write_output

DEFAULT_INPUT_NAME = "commentObject.json"
DEFAULT_OUTPUT_NAME = "structured_comments.json"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract comment threads and their nested replies from a post export JSON file."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_NAME,
        help=f"JSON document to search for comments (default: {DEFAULT_INPUT_NAME}).",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_NAME,
        help=f"Where to write the structured threads (default: {DEFAULT_OUTPUT_NAME}).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation used for the output JSON (default: 2).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print how many comments used each reply encoding.",
    )
    return parser.parse_args(argv)


def describe_reply_sources(result: StructureResult) -> str:
    parts = [
        f"{source.value}={result.reply_sources.get(source, 0)}"
        for source in ReplySource
    ]
    return "Reply shapes: " + ", ".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> StructureResult:
    args = parse_args(argv)
    source = Path(args.input).expanduser()
    destination = Path(args.output).expanduser()
    if not destination.is_absolute():
        destination = Path.cwd() / destination

    document = load_document(source)
    print(f"Searching for comments in {source}...")
    result = structure_comments(document)

    if not result.found:
        print(
            "Warning: could not find any array that looks like comments "
            "(nodes with id and author/body/message).",
            file=sys.stderr,
        )
        print(f"Writing empty array to {destination}.")
        write_output(destination, "[]")
        return result

    write_output(destination, render_threads(result.threads, indent=args.indent))
    print(f"Original top-level items: {len(result.forest)}")
    print(f"Final unique top-level threads: {len(result.threads)}")
    if args.summary:
        print(describe_reply_sources(result))
    print(f"Output saved to: {destination}")
    return result


def run(argv: Optional[Sequence[str]] = None) -> int:
    try:
        main(argv)
    except UserVisibleError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nCancelled.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
