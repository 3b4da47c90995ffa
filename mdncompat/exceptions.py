"""Exception types for pymdncompat."""

from __future__ import annotations


class MdnCompatError(Exception):
    """Base exception for expected application errors."""


class DatasetError(MdnCompatError):
    """Raised when an external dataset cannot be loaded."""

    def __init__(self, path: str, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Unable to load dataset from {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


class DescriptorError(MdnCompatError):
    """Raised when a package descriptor is missing or is not a JSON object."""

    def __init__(self, path: str, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Invalid package descriptor {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)
