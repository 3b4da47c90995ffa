"""Data models for front matter, resolved datasets and feature records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import BROWSER_COMPAT_KEY, PAGE_TYPE_KEY, SLUG_KEY, TITLE_KEY


@dataclass(frozen=True)
class FrontMatter:
    browser_compat: str
    page_type: str
    title: str | None = None
    slug: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, str]:
        """Return the flat key/value mapping of every key that was present."""
        output: dict[str, str] = {
            BROWSER_COMPAT_KEY: self.browser_compat,
            PAGE_TYPE_KEY: self.page_type,
        }
        if self.title is not None:
            output[TITLE_KEY] = self.title
        if self.slug is not None:
            output[SLUG_KEY] = self.slug
        output.update(self.extra)
        return output


@dataclass(frozen=True)
class CompatInfo:
    status: dict[str, Any] | None
    support: dict[str, Any] | None

    def to_json(self) -> dict[str, Any]:
        output: dict[str, Any] = {}
        if self.status:
            output["status"] = self.status
        if self.support:
            output["support"] = self.support
        return output


@dataclass(frozen=True)
class SpecInfo:
    name: str
    version: int


@dataclass(frozen=True)
class SpecSyntax:
    spec: SpecInfo
    syntax: str | None
    initial: Any
    applies_to: Any
    inherited: Any
    computed_value: Any
    animation_type: Any
    values: Any

    def to_json(self) -> dict[str, Any]:
        return {
            "spec": {"name": self.spec.name, "version": self.spec.version},
            "syntax": self.syntax,
            "initial": self.initial,
            "appliesTo": self.applies_to,
            "inherited": self.inherited,
            "computedValue": self.computed_value,
            "animationType": self.animation_type,
            "values": self.values,
        }


@dataclass(frozen=True)
class FeatureRecord:
    path: str
    type: str | None
    title: str | None
    mdn_url: str | None
    summary: str
    spec_url: str | list[str] | None
    compat: CompatInfo | None
    spec_data: SpecSyntax | None

    def to_json(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "type": self.type,
            "title": self.title,
            "mdnURL": self.mdn_url,
            "summary": self.summary,
            "specURL": self.spec_url,
            "compat": self.compat.to_json() if self.compat is not None else None,
            "specData": self.spec_data.to_json() if self.spec_data is not None else None,
        }


RECORD_JSON_KEYS: frozenset[str] = frozenset(
    {"path", "type", "title", "mdnURL", "summary", "specURL", "compat", "specData"}
)


@dataclass
class BuildStats:
    processed: int = 0
    skipped: int = 0
    skipped_files: list[str] = field(default_factory=list)
