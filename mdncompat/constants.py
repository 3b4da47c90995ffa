"""Constants used across pymdncompat."""

from __future__ import annotations

from typing import Final

MDN_BASE_URL: Final[str] = "https://developer.mozilla.org/en-US/docs"
MDN_URL_TEMPLATE: Final[str] = f"{MDN_BASE_URL}/{{slug}}"

CONTENT_DIR: Final[str] = "mdn-content/content/files/en-us"
CONTENT_GLOB: Final[str] = "**/*.md"
CONTENT_IGNORE: Final[tuple[str, ...]] = ()

COMPAT_DATA_PATH: Final[str] = "node_modules/@mdn/browser-compat-data/data.json"
SPEC_DATA_PATH: Final[str] = "node_modules/@webref/css"

DIST_DIR: Final[str] = "dist"
DATA_FILE_NAME: Final[str] = "data.json"
PACKAGE_DESCRIPTOR: Final[str] = "package.json"
FILES_TO_COPY: Final[tuple[str, ...]] = ("README.md",)

# Mirrored from the source package.json into dist/package.json.
MIRRORED_PACKAGE_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "version",
    "description",
    "repository",
    "bugs",
    "homepage",
    "author",
    "license",
)

FRONT_MATTER_DELIMITER: Final[str] = "---"
MACRO_OPEN: Final[str] = "{{"
MARKUP_OPEN: Final[str] = "<"
HEADING_MARKER: Final[str] = "#"

BROWSER_COMPAT_KEY: Final[str] = "browser-compat"
PAGE_TYPE_KEY: Final[str] = "page-type"
TITLE_KEY: Final[str] = "title"
SLUG_KEY: Final[str] = "slug"
KNOWN_FRONT_MATTER_KEYS: Final[frozenset[str]] = frozenset(
    {BROWSER_COMPAT_KEY, PAGE_TYPE_KEY, TITLE_KEY, SLUG_KEY}
)

COMPAT_MARKER: Final[str] = "__compat"

PAGE_TYPE_CSS_PROPERTY: Final[str] = "css-property"
PAGE_TYPE_CSS_SHORTHAND_PROPERTY: Final[str] = "css-shorthand-property"
PAGE_TYPE_CSS_SELECTOR: Final[str] = "css-selector"

PAGE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "css-at-rule",
        "css-at-rule-descriptor",
        "css-combinator",
        "css-function",
        "css-keyword",
        "css-media-feature",
        "css-property",
        "css-pseudo-class",
        "css-pseudo-element",
        "css-selector",
        "css-shorthand-property",
        "css-type",
        "html-attribute",
        "html-attribute-value",
        "html-element",
        "http-csp-directive",
        "http-header",
        "http-method",
        "http-permissions-policy-directive",
        "http-status-code",
        "javascript-class",
        "javascript-constructor",
        "javascript-function",
        "javascript-namespace",
        "javascript-global-property",
        "javascript-instance-accessor-property",
        "javascript-instance-data-property",
        "javascript-instance-method",
        "javascript-operator",
        "javascript-statement",
        "javascript-static-accessor-property",
        "javascript-static-data-property",
        "javascript-static-method",
        "mathml-attribute",
        "mathml-element",
        "svg-attribute",
        "svg-element",
        "web-api-constructor",
        "web-api-event",
        "web-api-global-function",
        "web-api-global-property",
        "web-api-instance-method",
        "web-api-instance-property",
        "web-api-interface",
        "web-api-static-method",
        "web-api-static-property",
        "webgl-extension",
        "webgl-extension-method",
        "webextension-api-event",
        "webextension-api-function",
        "webextension-api-property",
        "webextension-manifest-key",
    }
)

DEBUG_ENV_VAR: Final[str] = "MDNCOMPAT_DEBUG"
