"""Artifact writers for the dist directory."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import contextlib
import json
import logging
import os
from pathlib import Path
import shutil
import tempfile
from typing import Any

from .constants import DATA_FILE_NAME, MIRRORED_PACKAGE_FIELDS
from .exceptions import DescriptorError

LOGGER = logging.getLogger(__name__)


def _atomic_write_text(path: Path, content: str) -> None:
    """Write to a temporary file then atomically replace ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            with contextlib.suppress(OSError):
                tmp_path.unlink()


def dump_tree(tree: dict[str, Any]) -> str:
    """Serialize the output tree as compact JSON."""
    return json.dumps(tree, ensure_ascii=False, separators=(",", ":"))


def write_data(tree: dict[str, Any], dist_dir: Path) -> Path:
    """Write the merged feature tree to ``dist_dir/data.json``."""
    target = dist_dir / DATA_FILE_NAME
    _atomic_write_text(target, dump_tree(tree))
    LOGGER.info("Wrote %s", target)
    return target


def _load_descriptor(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DescriptorError(str(path), cause="file not found") from exc
    except json.JSONDecodeError as exc:
        raise DescriptorError(str(path), cause=exc.__class__.__name__) from exc
    if not isinstance(payload, dict):
        raise DescriptorError(str(path), cause="expected a JSON object")
    return payload


def mirror_fields(
    source: dict[str, Any],
    target: dict[str, Any],
    fields: Sequence[str] = MIRRORED_PACKAGE_FIELDS,
) -> dict[str, Any]:
    """Copy ``fields`` from source into target; fields the source lacks are dropped."""
    output = dict(target)
    for name in fields:
        if name in source:
            output[name] = source[name]
        else:
            output.pop(name, None)
    return output


def prepare_dist_package(source_path: Path, target_path: Path) -> dict[str, Any]:
    """Load both descriptors and return the mirrored target, without writing it."""
    return mirror_fields(_load_descriptor(source_path), _load_descriptor(target_path))


def write_dist_package(target_path: Path, descriptor: dict[str, Any]) -> None:
    _atomic_write_text(target_path, json.dumps(descriptor, indent=2, ensure_ascii=False))
    LOGGER.info("Updated %s", target_path)


def check_files_exist(files: Iterable[Path]) -> None:
    for source in files:
        if not source.is_file():
            raise FileNotFoundError(f"File to copy not found: {source}")


def copy_files_to_dist(files: Iterable[Path], dist_dir: Path) -> list[Path]:
    copied: list[Path] = []
    for source in files:
        target = dist_dir / source.name
        shutil.copyfile(source, target)
        LOGGER.debug("Copied %s to %s", source, target)
        copied.append(target)
    return copied
