"""Front-matter parser for MDN markdown documents."""

from __future__ import annotations

import logging

from .constants import (
    BROWSER_COMPAT_KEY,
    FRONT_MATTER_DELIMITER,
    KNOWN_FRONT_MATTER_KEYS,
    PAGE_TYPE_KEY,
    PAGE_TYPES,
    SLUG_KEY,
    TITLE_KEY,
)
from .model import FrontMatter
from .util.text import strip_matching_quotes

LOGGER = logging.getLogger(__name__)


def find_body_start(lines: list[str]) -> int:
    """Return the index of the first line after the closing header delimiter."""
    if not lines or not lines[0].startswith(FRONT_MATTER_DELIMITER):
        return 0
    for index in range(1, len(lines)):
        if lines[index].startswith(FRONT_MATTER_DELIMITER):
            return index + 1
    return 0


def _split_field(line: str) -> tuple[str, str]:
    key, _sep, value = line.partition(":")
    return key.strip(), strip_matching_quotes(value.strip())


def parse_fields(text: str) -> dict[str, str] | None:
    """Parse the raw header block into a flat mapping, or None without one.

    A header that is never closed by a second delimiter is not a header.
    """
    lines = text.split("\n")
    body_start = find_body_start(lines)
    if body_start == 0:
        return None

    header = lines[1 : body_start - 1]
    if not header:
        return None

    fields: dict[str, str] = {}
    for line in header:
        key, value = _split_field(line)
        fields[key] = value
    return fields


def parse_front_matter(text: str) -> FrontMatter | None:
    """Parse and validate a document header.

    Returns None when the header is missing, lacks ``browser-compat`` or
    ``page-type``, or names a page type outside the supported set.
    """
    fields = parse_fields(text)
    if fields is None:
        LOGGER.debug("No front matter block")
        return None

    browser_compat = fields.get(BROWSER_COMPAT_KEY, "")
    if not browser_compat:
        LOGGER.debug("Front matter has no %s key", BROWSER_COMPAT_KEY)
        return None

    page_type = fields.get(PAGE_TYPE_KEY, "")
    if not page_type:
        LOGGER.debug("Front matter has no %s key", PAGE_TYPE_KEY)
        return None
    if page_type not in PAGE_TYPES:
        LOGGER.debug("Unsupported page type %r", page_type)
        return None

    extra = {key: value for key, value in fields.items() if key not in KNOWN_FRONT_MATTER_KEYS}
    if extra:
        LOGGER.debug("Unrecognized front matter keys: %s", ", ".join(sorted(extra)))

    return FrontMatter(
        browser_compat=browser_compat,
        page_type=page_type,
        title=fields.get(TITLE_KEY),
        slug=fields.get(SLUG_KEY),
        extra=extra,
    )
