"""Shared pytest fixtures for the comment thread test suite."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest


ROOT_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT_DIR / "src"
for path in (ROOT_DIR, SRC_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(scope="session")
def workspace_root() -> Path:
    """Return the repository root for locating sources and running modules."""
    return ROOT_DIR


@pytest.fixture()
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Serialize a document to a JSON file under tmp_path and return its path."""

    def _write(document: Any, name: str = "commentObject.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
