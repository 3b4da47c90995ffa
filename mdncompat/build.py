"""Build pipeline: corpus documents to the merged feature tree and dist artifacts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .config import BuildConfig
from .constants import MDN_URL_TEMPLATE
from .corpus import list_documents, read_document
from .datasets import load_compat_data, load_spec_data
from .model import BuildStats, FeatureRecord, FrontMatter
from .output import (
    check_files_exist,
    copy_files_to_dist,
    prepare_dist_package,
    write_data,
    write_dist_package,
)
from .parse_front_matter import parse_front_matter
from .parse_summary import extract_summary
from .resolve_compat import resolve_compat, spec_url, trim_compat
from .resolve_spec import resolve_spec_syntax
from .tree import OutputTree, merge_record

LOGGER = logging.getLogger(__name__)


def mdn_url(front_matter: FrontMatter) -> str | None:
    if not front_matter.slug:
        return None
    return MDN_URL_TEMPLATE.format(slug=front_matter.slug)


def build_feature_record(
    front_matter: FrontMatter,
    text: str,
    compat_data: dict[str, Any],
    spec_data: dict[str, dict[str, Any]],
) -> FeatureRecord:
    """Assemble the feature record for one parsed document."""
    path = front_matter.browser_compat
    compat_record = resolve_compat(compat_data, path)
    return FeatureRecord(
        path=path,
        type=front_matter.page_type,
        title=front_matter.title,
        mdn_url=mdn_url(front_matter),
        summary=extract_summary(text),
        spec_url=spec_url(compat_record),
        compat=trim_compat(compat_record),
        spec_data=resolve_spec_syntax(spec_data, path, front_matter.page_type),
    )


def build_tree(
    content_dir: Path,
    documents: list[str],
    compat_data: dict[str, Any],
    spec_data: dict[str, dict[str, Any]],
) -> tuple[OutputTree, BuildStats]:
    """Fold every usable document into one output tree, in order."""
    tree: OutputTree = {}
    stats = BuildStats()

    for relative in documents:
        text = read_document(content_dir, relative)
        front_matter = parse_front_matter(text)
        if front_matter is None:
            LOGGER.info("Skipping %s, no usable front matter.", relative)
            stats.skipped += 1
            stats.skipped_files.append(relative)
            continue

        LOGGER.info("Processing %s...", relative)
        record = build_feature_record(front_matter, text, compat_data, spec_data)
        tree = merge_record(tree, record)
        stats.processed += 1

    return tree, stats


def run_build(config: BuildConfig) -> BuildStats:
    """Run the whole build and write every dist artifact.

    Every input is loaded and checked before the first write, so a failing
    run leaves the previous dist artifacts in place.
    """
    compat_data = load_compat_data(config.compat_data_path)
    spec_data = load_spec_data(config.spec_data_path)
    dist_package = prepare_dist_package(config.package_descriptor, config.dist_package_descriptor)
    files_to_copy = [Path(name) for name in config.files_to_copy]
    check_files_exist(files_to_copy)

    documents = list_documents(config.content_dir, config.content_glob, config.content_ignore)
    LOGGER.debug("Found %d documents under %s", len(documents), config.content_dir)

    tree, stats = build_tree(config.content_dir, documents, compat_data, spec_data)

    write_data(tree, config.dist_dir)
    write_dist_package(config.dist_package_descriptor, dist_package)
    copy_files_to_dist(files_to_copy, config.dist_dir)
    return stats
