"""Build MDN feature summaries enriched with compat and spec syntax data."""

from ._version import __version__

__all__ = ["__version__"]
