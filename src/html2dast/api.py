#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/api.py
"""Public entry points for converting HTML and input trees to dast documents.

The asynchronous functions are the primary interface, since handlers may be
coroutine functions. The ``*_sync`` variants run them with :func:`asyncio.run`
and must not be called from inside a running event loop.

Examples
--------
>>> from html2dast import html_to_structured_text_sync
>>> html_to_structured_text_sync("<p>Hello <em>world</em></p>").to_dict()["document"]["children"][0]["type"]
'paragraph'

"""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Mapping, Optional, Union

from html2dast.contentful import CONTENTFUL_HANDLERS, rich_text_to_hast
from html2dast.dast.nodes import Root as DastRoot
from html2dast.dast.nodes import StructuredTextDocument, create_node
from html2dast.engine.context import Context, GlobalContext, Handler
from html2dast.engine.handlers import DEFAULT_HANDLERS
from html2dast.engine.visitor import HandlerRegistry, visit_node
from html2dast.exceptions import InvalidOptionsError, ValidationError
from html2dast.hast.minify import minify_whitespace
from html2dast.hast.nodes import Element, HastNode, Root, Text, from_dict
from html2dast.hast.soup import parse_html
from html2dast.options.conversion import ConversionOptions
from html2dast.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

TreeInput = Union[HastNode, Mapping[str, Any]]


def _validate_options(options: Optional[ConversionOptions], entry_point: str) -> ConversionOptions:
    if options is None:
        return ConversionOptions()
    if not isinstance(options, ConversionOptions):
        raise InvalidOptionsError(
            entry_point=entry_point, expected_type=ConversionOptions, received_type=type(options)
        )
    return options


def _prepare_tree(tree: TreeInput) -> Root:
    if isinstance(tree, Mapping):
        node = from_dict(tree)
    elif isinstance(tree, (Root, Element, Text)):
        node = copy.deepcopy(tree)
    else:
        raise ValidationError(
            f"Expected an input tree or a mapping, got {type(tree).__name__}",
            parameter_name="tree",
            parameter_value=tree,
        )
    return node if isinstance(node, Root) else Root(children=[node])


def _build_global_context(shared: Mapping[str, Any]) -> GlobalContext:
    try:
        return GlobalContext(**shared)
    except TypeError as e:
        raise ValidationError(
            f"Unknown key in shared: {', '.join(sorted(shared))}", parameter_name="shared", parameter_value=shared
        ) from e


async def hast_to_structured_text(
    tree: TreeInput, options: Optional[ConversionOptions] = None
) -> Optional[StructuredTextDocument]:
    """Convert an input tree to a dast document.

    The caller's tree is never modified; conversion works on a copy.

    Parameters
    ----------
    tree : HastNode or Mapping
        Input tree, or a JSON-like mapping in hast shape. A node other than a
        root is treated as the only child of an implicit root.
    options : ConversionOptions, optional
        Conversion configuration

    Returns
    -------
    StructuredTextDocument or None
        The converted document, or None when there is no content

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a ConversionOptions instance
    ValidationError
        If ``tree`` or ``options.shared`` cannot be used
    ParsingError
        If a mapping is not a valid hast tree

    """
    options = _validate_options(options, "hast_to_structured_text")
    root = _prepare_tree(tree)
    return await _convert(root, options, DEFAULT_HANDLERS, minify=options.minify_whitespace)


async def _convert(
    root: Root, options: ConversionOptions, default_handlers: Mapping[str, Handler], minify: bool
) -> Optional[StructuredTextDocument]:
    if minify:
        minify_whitespace(root, newlines=options.newlines)

    if options.preprocess is not None:
        options.preprocess(root)

    registry = HandlerRegistry(default_handlers, options.handlers)
    context = Context(
        parent_node_type="root",
        parent_node=None,
        handlers=registry,
        default_handlers=registry.defaults,
        wrap_text=True,
        allowed_blocks=options.allowed_blocks,
        allowed_marks=options.allowed_marks,
        code_prefix=options.code_prefix,
        global_context=_build_global_context(options.shared),
    )

    with debug_timer(logger, "Conversion to dast"):
        result = await visit_node(create_node, root, context)

    if isinstance(result, list) and len(result) == 1:
        result = result[0]

    if not result:
        logger.debug("Document has no convertible content")
        return None
    if not isinstance(result, DastRoot):
        raise ValidationError(
            f"Root handler must return a root node, got {type(result).__name__}",
            parameter_name="handlers",
            parameter_value=result,
        )
    return StructuredTextDocument(document=result)


async def html_to_structured_text(
    html: str, options: Optional[ConversionOptions] = None
) -> Optional[StructuredTextDocument]:
    """Parse an HTML string with BeautifulSoup and convert it to a dast document.

    Parameters
    ----------
    html : str
        HTML markup, either a fragment or a whole document
    options : ConversionOptions, optional
        Conversion configuration; ``html_parser`` selects the BeautifulSoup
        tree builder

    Returns
    -------
    StructuredTextDocument or None
        The converted document, or None when there is no content

    Raises
    ------
    DependencyError
        If beautifulsoup4 or the selected parser is not installed

    """
    options = _validate_options(options, "html_to_structured_text")
    tree = parse_html(html, options.html_parser)
    return await hast_to_structured_text(tree, options)


async def rich_text_to_structured_text(
    document: Optional[Mapping[str, Any]], options: Optional[ConversionOptions] = None
) -> Optional[StructuredTextDocument]:
    """Convert a Contentful rich-text document to a dast document.

    Rich-text nodes are mapped onto an input tree and converted with the
    built-in handlers, except that a top-level paragraph whose only text
    carries just the ``code`` mark becomes a ``code`` block. Text values are
    kept as they are; ``minify_whitespace`` and ``newlines`` do not apply.

    Embedded assets become ``block`` nodes at the top level only. Pass
    ``preprocess=lift_assets`` to move nested assets out of lists and other
    containers first.

    Parameters
    ----------
    document : Mapping or None
        Rich-text JSON whose ``nodeType`` is ``"document"``
    options : ConversionOptions, optional
        Conversion configuration

    Returns
    -------
    StructuredTextDocument or None
        The converted document, or None when ``document`` is None or has no
        content

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a ConversionOptions instance
    ParsingError
        If ``document`` is not a rich-text document

    """
    options = _validate_options(options, "rich_text_to_structured_text")
    if document is None:
        return None
    root = rich_text_to_hast(document)
    return await _convert(root, options, CONTENTFUL_HANDLERS, minify=False)


def hast_to_structured_text_sync(
    tree: TreeInput, options: Optional[ConversionOptions] = None
) -> Optional[StructuredTextDocument]:
    """Run :func:`hast_to_structured_text` to completion in a new event loop."""
    return asyncio.run(hast_to_structured_text(tree, options))


def html_to_structured_text_sync(
    html: str, options: Optional[ConversionOptions] = None
) -> Optional[StructuredTextDocument]:
    """Run :func:`html_to_structured_text` to completion in a new event loop."""
    return asyncio.run(html_to_structured_text(html, options))


def rich_text_to_structured_text_sync(
    document: Optional[Mapping[str, Any]], options: Optional[ConversionOptions] = None
) -> Optional[StructuredTextDocument]:
    """Run :func:`rich_text_to_structured_text` to completion in a new event loop."""
    return asyncio.run(rich_text_to_structured_text(document, options))


__all__ = [
    "hast_to_structured_text",
    "html_to_structured_text",
    "rich_text_to_structured_text",
    "hast_to_structured_text_sync",
    "html_to_structured_text_sync",
    "rich_text_to_structured_text_sync",
]
