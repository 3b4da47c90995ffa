"""Compatibility record lookup in browser-compat-data."""

from __future__ import annotations

import logging
from typing import Any

from .constants import COMPAT_MARKER
from .model import CompatInfo

LOGGER = logging.getLogger(__name__)


def resolve_compat(compat_data: dict[str, Any], path: str) -> dict[str, Any] | None:
    """Walk the dataset along a dotted path and return its ``__compat`` record."""
    node: object = compat_data
    for segment in path.split("."):
        if not isinstance(node, dict) or segment not in node:
            LOGGER.debug("No compat data at %s (missing %r)", path, segment)
            return None
        node = node[segment]

    if not isinstance(node, dict):
        return None
    record = node.get(COMPAT_MARKER)
    if not isinstance(record, dict):
        LOGGER.debug("No %s record at %s", COMPAT_MARKER, path)
        return None
    return record


def trim_compat(record: dict[str, Any] | None) -> CompatInfo | None:
    """Keep only the status and support fields of a compat record."""
    if record is None:
        return None
    return CompatInfo(status=record.get("status"), support=record.get("support"))


def spec_url(record: dict[str, Any] | None) -> str | list[str] | None:
    if not record:
        return None
    return record.get("spec_url") or None
