#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/hast/soup.py
"""Adapter from BeautifulSoup documents to input trees.

BeautifulSoup is an optional dependency (``pip install html2dast[html]``);
it is imported lazily by the functions that need it.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from html2dast.constants import DEPS_HTML, HTML_PARSERS
from html2dast.exceptions import DependencyError, ValidationError
from html2dast.hast.nodes import Element, HastNode, Root, Text
from html2dast.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import PageElement

logger = logging.getLogger(__name__)

# Parsers that need a package besides beautifulsoup4
_PARSER_PACKAGES = {"html5lib": "html5lib", "lxml": "lxml"}


def _convert_properties(attrs: dict[str, Any]) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for name, value in attrs.items():
        if name == "class":
            properties["className"] = list(value) if isinstance(value, (list, tuple)) else str(value).split()
        elif isinstance(value, (list, tuple)):
            properties[name] = " ".join(value)
        else:
            properties[name] = value
    return properties


def _convert(node: PageElement) -> Optional[HastNode]:
    from bs4.element import NavigableString, PreformattedString, Tag

    # comments, doctypes, declarations, CDATA and processing instructions
    if isinstance(node, PreformattedString):
        return None
    if isinstance(node, NavigableString):
        return Text(value=str(node))
    if isinstance(node, Tag):
        children = [converted for child in node.children if (converted := _convert(child)) is not None]
        return Element(tag_name=node.name.lower(), properties=_convert_properties(node.attrs), children=children)
    return None


def soup_to_hast(soup: BeautifulSoup) -> Root:
    """Convert a parsed BeautifulSoup document to an input tree.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document

    Returns
    -------
    Root
        Input tree. ``class`` attributes are stored as ``className`` lists and
        other multi-valued attributes are joined with spaces.

    """
    children = [converted for child in soup.children if (converted := _convert(child)) is not None]
    return Root(children=children)


@requires_dependencies("html", DEPS_HTML)
def parse_html(html: str, parser: str = "html.parser") -> Root:
    """Parse an HTML string into an input tree.

    Parameters
    ----------
    html : str
        HTML markup; may be a fragment or a whole document
    parser : {"html.parser", "html5lib", "lxml"}, default = "html.parser"
        BeautifulSoup tree builder to use

    Returns
    -------
    Root
        Input tree

    Raises
    ------
    DependencyError
        If beautifulsoup4 or the selected parser is not installed
    ValidationError
        If ``parser`` is not a supported parser name

    """
    from bs4 import BeautifulSoup
    from bs4.exceptions import FeatureNotFound

    if parser not in HTML_PARSERS:
        raise ValidationError(
            f"Unsupported HTML parser: {parser!r}. Choose one of {', '.join(HTML_PARSERS)}",
            parameter_name="html_parser",
            parameter_value=parser,
        )

    try:
        soup = BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        package = _PARSER_PACKAGES.get(parser)
        raise DependencyError(
            "html",
            missing_packages=[(package, "")] if package else [],
            message=f"BeautifulSoup parser {parser!r} is not available: {e}",
        ) from e

    logger.debug(f"Parsed {len(html)} characters of HTML with {parser}")
    return soup_to_hast(soup)


__all__ = ["parse_html", "soup_to_hast"]
