"""Build configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .constants import (
    COMPAT_DATA_PATH,
    CONTENT_DIR,
    CONTENT_GLOB,
    CONTENT_IGNORE,
    DATA_FILE_NAME,
    DIST_DIR,
    FILES_TO_COPY,
    PACKAGE_DESCRIPTOR,
    SPEC_DATA_PATH,
)


@dataclass(frozen=True)
class BuildConfig:
    content_dir: Path = Path(CONTENT_DIR)
    content_glob: str = CONTENT_GLOB
    content_ignore: tuple[str, ...] = CONTENT_IGNORE
    compat_data_path: Path = Path(COMPAT_DATA_PATH)
    spec_data_path: Path = Path(SPEC_DATA_PATH)
    dist_dir: Path = Path(DIST_DIR)
    package_descriptor: Path = Path(PACKAGE_DESCRIPTOR)
    files_to_copy: tuple[str, ...] = FILES_TO_COPY

    @property
    def data_path(self) -> Path:
        return self.dist_dir / DATA_FILE_NAME

    @property
    def dist_package_descriptor(self) -> Path:
        return self.dist_dir / PACKAGE_DESCRIPTOR
