"""Loaders for the external compatibility and specification-syntax datasets."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import DatasetError

LOGGER = logging.getLogger(__name__)

_LISTING_KEYS = ("properties", "selectors")


def _load_json(path: Path) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DatasetError(str(path), cause="file not found") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(str(path), cause=exc.__class__.__name__) from exc


def _is_listing(payload: object) -> bool:
    return isinstance(payload, dict) and any(key in payload for key in _LISTING_KEYS)


def load_compat_data(path: Path) -> dict[str, Any]:
    """Load the browser-compat-data JSON bundle."""
    payload = _load_json(path)
    if not isinstance(payload, dict):
        raise DatasetError(str(path), cause="expected a JSON object")
    LOGGER.debug("Loaded compat data from %s", path)
    return payload


def load_spec_data(path: Path) -> dict[str, dict[str, Any]]:
    """Load specification listings keyed by spec short name.

    ``path`` is either a directory of ``<shortname>.json`` files or a single
    JSON object mapping short names to listings. Entries without a
    ``properties`` or ``selectors`` key are not listings and are skipped.
    """
    listings: dict[str, dict[str, Any]] = {}

    if path.is_dir():
        for candidate in sorted(path.glob("*.json")):
            payload = _load_json(candidate)
            if not _is_listing(payload):
                LOGGER.debug("Skipping %s, not a spec listing", candidate.name)
                continue
            listings[candidate.stem] = payload
    else:
        payload = _load_json(path)
        if not isinstance(payload, dict):
            raise DatasetError(str(path), cause="expected a JSON object")
        for short_name, listing in payload.items():
            if not _is_listing(listing):
                LOGGER.debug("Skipping %s, not a spec listing", short_name)
                continue
            listings[short_name] = listing

    LOGGER.debug("Loaded %d spec listings from %s", len(listings), path)
    return listings
