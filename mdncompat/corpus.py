"""Markdown corpus enumeration and reading."""

from __future__ import annotations

from collections.abc import Sequence
from fnmatch import fnmatch
import logging
from pathlib import Path

from .constants import CONTENT_GLOB

LOGGER = logging.getLogger(__name__)


def _is_hidden(relative: str) -> bool:
    return any(part.startswith(".") for part in relative.split("/"))


def _is_ignored(relative: str, ignore: Sequence[str]) -> bool:
    return any(fnmatch(relative, pattern) for pattern in ignore)


def list_documents(
    root: Path,
    pattern: str = CONTENT_GLOB,
    ignore: Sequence[str] = (),
) -> list[str]:
    """Return document paths under root, relative and sorted for reproducible output."""
    if not root.is_dir():
        raise FileNotFoundError(f"Content directory not found: {root}")

    output: list[str] = []
    for candidate in root.glob(pattern):
        if not candidate.is_file():
            continue
        relative = candidate.relative_to(root).as_posix()
        if _is_hidden(relative):
            continue
        if _is_ignored(relative, ignore):
            LOGGER.debug("Ignoring %s", relative)
            continue
        output.append(relative)
    return sorted(output)


def read_document(root: Path, relative: str) -> str:
    """Read one corpus document as UTF-8 text."""
    return (root / relative).read_text(encoding="utf-8")
