"""Console script for mdncompat."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from . import __version__ as _version
from .build import run_build
from .config import BuildConfig
from .constants import (
    COMPAT_DATA_PATH,
    CONTENT_DIR,
    DIST_DIR,
    PACKAGE_DESCRIPTOR,
    SPEC_DATA_PATH,
)
from .exceptions import MdnCompatError
from .model import BuildStats
from .util.text import debug_enabled


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _render_summary(stats: BuildStats, config: BuildConfig, debug: bool = False) -> Panel:
    lines = [
        Text(f"Processed: {stats.processed}"),
        Text(f"Skipped: {stats.skipped}"),
        Text(f"Output: {config.data_path}", style="dim"),
    ]
    if debug and stats.skipped_files:
        lines.append(Text("Skipped files:"))
        lines.extend(Text(f"  {name}", style="dim") for name in stats.skipped_files)
    return Panel(Text("\n").join(lines), border_style="blue", title="mdncompat")


_PATH = click.Path(path_type=Path)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--content-dir", type=_PATH, default=CONTENT_DIR, show_default=True)
@click.option("--dist-dir", type=_PATH, default=DIST_DIR, show_default=True)
@click.option("--compat-data", type=_PATH, default=COMPAT_DATA_PATH, show_default=True)
@click.option("--spec-data", type=_PATH, default=SPEC_DATA_PATH, show_default=True)
@click.option("--package-json", type=_PATH, default=PACKAGE_DESCRIPTOR, show_default=True)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(_version, "-v", "--version")
def main(
    content_dir: Path,
    dist_dir: Path,
    compat_data: Path,
    spec_data: Path,
    package_json: Path,
    debug: bool,
) -> None:
    """
    Build the MDN feature summary dataset

    \b
    Reads MDN markdown front matter, joins browser-compat-data and
    webref CSS syntax, and writes dist/data.json.
    """
    debug = debug or debug_enabled()
    _configure_logging(debug)

    config = BuildConfig(
        content_dir=content_dir,
        compat_data_path=compat_data,
        spec_data_path=spec_data,
        dist_dir=dist_dir,
        package_descriptor=package_json,
    )

    try:
        stats = run_build(config)
    except MdnCompatError as exc:
        Console().print(Text.assemble(("Error:", "bold red"), f" {exc}"))
        raise SystemExit(1) from exc

    Console().print(_render_summary(stats, config, debug))
