"""Summary extraction: the first prose paragraph after the front matter."""

from __future__ import annotations

from .constants import HEADING_MARKER, MACRO_OPEN, MARKUP_OPEN
from .parse_front_matter import find_body_start
from .util.markdown import markdown_to_text
from .util.text import is_blank


def _is_skippable(line: str) -> bool:
    return is_blank(line) or line.startswith(MACRO_OPEN) or line.strip().startswith(MARKUP_OPEN)


def _first_paragraph(lines: list[str], start: int) -> list[str]:
    index = start
    while index < len(lines) and _is_skippable(lines[index]):
        index += 1

    paragraph: list[str] = []
    for line in lines[index:]:
        if is_blank(line) or line.startswith(HEADING_MARKER):
            break
        paragraph.append(line)
    return paragraph


def extract_summary(text: str) -> str:
    """Return the document's first prose paragraph as plain text."""
    lines = text.split("\n")
    paragraph = _first_paragraph(lines, find_body_start(lines))
    if not paragraph:
        return ""
    return markdown_to_text("\n".join(paragraph))
