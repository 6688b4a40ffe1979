"""Reading saved documents and writing converter output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import Document


def tree_json(tree: Any) -> str:
    """Sorted, indented JSON with a trailing newline."""
    return json.dumps(tree, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_text(path: Path, content: str) -> Path:
    """Write text content to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def dump_tree(path: Path, tree: Any) -> Path:
    return write_text(path, tree_json(tree))


def _read_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    path = Path(source)
    if not path.exists():
        raise SystemExit(f"Document file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_document(source: str) -> Document:
    """Load a documents.get payload from a path, or from stdin when ``-``."""
    try:
        return Document.model_validate(_read_payload(source))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise SystemExit(f"Invalid document in {source}: {exc}") from exc


def log(msg: str, *, silent: bool = False) -> None:
    """Progress output for the CLI; ``--silent`` turns it off."""
    if not silent:
        print(msg, file=sys.stderr)


def warn(msg: str) -> None:
    """Warnings are printed even under ``--silent``."""
    print(f"warning: {msg}", file=sys.stderr)


__all__ = [
    "dump_tree",
    "load_document",
    "log",
    "tree_json",
    "warn",
    "write_text",
]
