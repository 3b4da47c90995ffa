"""Nested output tree keyed by dotted feature paths."""

from __future__ import annotations

import logging
from typing import Any

from .model import RECORD_JSON_KEYS, FeatureRecord

LOGGER = logging.getLogger(__name__)

OutputTree = dict[str, Any]


def _is_record(node: object) -> bool:
    return isinstance(node, dict) and RECORD_JSON_KEYS <= node.keys()


def _warn_collision(parent: str, key: str) -> None:
    LOGGER.warning("Dropping %s.%s, the name collides with a record field", parent, key)


def _child_subtrees(node: object, path: str) -> dict[str, Any]:
    if not isinstance(node, dict):
        return {}
    if _is_record(node):
        return {key: value for key, value in node.items() if key not in RECORD_JSON_KEYS}

    children: dict[str, Any] = {}
    for key, value in node.items():
        if key in RECORD_JSON_KEYS:
            _warn_collision(path, key)
            continue
        children[key] = value
    return children


def merge_record(tree: OutputTree, record: FeatureRecord) -> OutputTree:
    """Store a record under its dotted path, creating intermediate levels.

    A record already stored at the same path is replaced. Deeper features
    merged earlier under that path are kept alongside the new record.
    Record fields always win over child features of the same name; such a
    child is dropped with a warning whichever of the two arrives first.
    """
    if not record.path:
        raise ValueError("Feature record has an empty path")

    *parents, leaf = record.path.split(".")
    current = tree
    for index, part in enumerate(parents):
        if _is_record(current) and part in RECORD_JSON_KEYS:
            _warn_collision(".".join(parents[:index]), part)
            return tree
        node = current.get(part)
        if not isinstance(node, dict):
            node = {}
            current[part] = node
        current = node

    if _is_record(current) and leaf in RECORD_JSON_KEYS:
        _warn_collision(".".join(parents), leaf)
        return tree

    value = record.to_json()
    value.update(_child_subtrees(current.get(leaf), record.path))
    current[leaf] = value
    return tree
