#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/constants.py
"""Constants and default values used across html2dast.

This module centralizes default option values, the recognized block and mark
names, and the optional dependency specifications so that the options layer,
the engine and the HTML adapter agree on a single source of truth.

"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Block and mark vocabularies
# =============================================================================

BlockType = Literal["blockquote", "code", "heading", "link", "list"]
Mark = Literal["strong", "code", "emphasis", "underline", "strikethrough", "highlight"]
HtmlParser = Literal["html.parser", "html5lib", "lxml"]

BLOCK_TYPES: tuple[str, ...] = ("blockquote", "code", "heading", "link", "list")
MARKS: tuple[str, ...] = ("strong", "code", "emphasis", "underline", "strikethrough", "highlight")
HTML_PARSERS: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# =============================================================================
# Conversion defaults
# =============================================================================

DEFAULT_ALLOWED_BLOCKS: tuple[str, ...] = BLOCK_TYPES
DEFAULT_ALLOWED_MARKS: tuple[str, ...] = MARKS
DEFAULT_CODE_PREFIX = "language-"
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_MINIFY_WHITESPACE = True
DEFAULT_NEWLINES = False

# Output document wrapper tag
DAST_SCHEMA = "dast"

# =============================================================================
# HTML vocabulary
# =============================================================================

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# Elements whose whitespace is significant and must survive minification
PREFORMATTED_ELEMENTS = frozenset({"pre", "listing", "plaintext", "xmp", "textarea"})

# Phrasing (inline) HTML elements; anything else is treated as a block boundary
# when collapsing whitespace or extracting text.
INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "img",
        "ins",
        "kbd",
        "mark",
        "q",
        "s",
        "samp",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "time",
        "tt",
        "u",
        "var",
        "wbr",
    }
)

# Elements standing for an embedded asset reference; the reference is the ``id`` property
ASSET_TAGS = ("asset", "embedded-asset-block")

# Google Docs wraps clipboard content in a <b id="docs-internal-guid-..."> element
GOOGLE_DOCS_ID_PREFIX = "docs-internal-guid-"

# =============================================================================
# Optional dependencies: (install_name, import_name, version_spec)
# =============================================================================

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
