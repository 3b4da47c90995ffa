"""Markdown helpers built around markdown-it-py."""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .text import normalize_whitespace

_MARKDOWN = MarkdownIt("commonmark")

# **`<element>`** reads badly once the markup is gone; keep only the name.
_BOLD_ELEMENT_RE = re.compile(r"\*\*`<(.*?)>`\*\*")
_MACRO_RE = re.compile(r"{{.*?}}", re.DOTALL)
_QUOTED_RE = re.compile(r"['\"](.*?)['\"]")

_TEXT_TOKENS = frozenset({"text", "text_special", "code_inline"})
_BREAK_TOKENS = frozenset({"softbreak", "hardbreak"})


def _inline_text(children: list[Token]) -> str:
    parts: list[str] = []
    for child in children:
        if child.type in _TEXT_TOKENS:
            parts.append(child.content)
        elif child.type in _BREAK_TOKENS:
            parts.append("\n")
        elif child.type == "image":
            parts.append(child.content)
    return "".join(parts)


def strip_markdown(md: str) -> str:
    """Drop inline markdown syntax and inline HTML tags, keeping the prose."""
    parts: list[str] = []
    for token in _MARKDOWN.parseInline(md):
        if token.children:
            parts.append(_inline_text(token.children))
    return "".join(parts)


def replace_macros(value: str) -> str:
    """Replace ``{{macro("text")}}`` placeholders with their first quoted argument."""

    def _replace(match: re.Match[str]) -> str:
        quoted = _QUOTED_RE.search(match.group(0))
        if quoted:
            return quoted.group(1)
        return match.group(0)

    return _MACRO_RE.sub(_replace, value)


def markdown_to_text(md: str) -> str:
    """Convert a markdown snippet into a single line of plain prose."""
    md = _BOLD_ELEMENT_RE.sub(r"\1", md)
    return normalize_whitespace(replace_macros(strip_markdown(md)))
