#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/contentful/rich_text.py
"""Adapter from Contentful rich-text documents to input trees.

Contentful stores rich text as JSON nodes with a ``nodeType``, a ``content``
list and a ``data`` mapping; text nodes carry a ``value`` and a list of
``marks``. :func:`rich_text_to_hast` maps those nodes onto the HTML element
names the built-in handlers already understand, so both sources share one
conversion engine:

    - ``paragraph``, ``heading-1`` .. ``heading-6``, ``blockquote``, ``hr``,
      ``unordered-list``, ``ordered-list`` and ``list-item`` become ``p``,
      ``h1`` .. ``h6``, ``blockquote``, ``hr``, ``ul``, ``ol`` and ``li``
    - ``hyperlink`` becomes ``a`` with ``href`` taken from ``data.uri``
    - ``embedded-asset-block`` keeps its name, with the asset id as ``id``
    - marks become nested ``strong``, ``em``, ``u`` and ``code`` elements

Node types without a counterpart (entries, tables, ...) keep their
``nodeType`` as tag name; the engine converts their content and drops the
wrapper.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from html2dast.exceptions import ParsingError
from html2dast.hast.nodes import Element, HastNode, Root, Text

logger = logging.getLogger(__name__)

DOCUMENT_NODE_TYPE = "document"

NODE_TAGS: Mapping[str, str] = {
    "paragraph": "p",
    "heading-1": "h1",
    "heading-2": "h2",
    "heading-3": "h3",
    "heading-4": "h4",
    "heading-5": "h5",
    "heading-6": "h6",
    "unordered-list": "ul",
    "ordered-list": "ol",
    "list-item": "li",
    "blockquote": "blockquote",
    "hr": "hr",
    "hyperlink": "a",
    "embedded-asset-block": "embedded-asset-block",
}

MARK_TAGS: Mapping[str, str] = {
    "bold": "strong",
    "italic": "em",
    "underline": "u",
    "code": "code",
}


def _target_id(data: Mapping[str, Any]) -> Optional[str]:
    target = data.get("target")
    if not isinstance(target, Mapping):
        return None
    sys = target.get("sys")
    if not isinstance(sys, Mapping) or not sys.get("id"):
        return None
    return str(sys["id"])


def _convert_text(node: Mapping[str, Any]) -> HastNode:
    converted: HastNode = Text(value=str(node.get("value", "")))
    # the first mark ends up outermost, so marks keep their order on the span
    for mark in reversed(node.get("marks") or []):
        mark_type = mark.get("type") if isinstance(mark, Mapping) else None
        tag_name = MARK_TAGS.get(mark_type)
        if tag_name is None:
            logger.debug(f"Ignoring unsupported rich-text mark {mark_type!r}")
            continue
        converted = Element(tag_name=tag_name, children=[converted])
    return converted


def _convert(node: Any) -> HastNode:
    if not isinstance(node, Mapping):
        raise ParsingError(f"Expected a mapping for a rich-text node, got {type(node).__name__}")

    node_type = node.get("nodeType")
    if node_type == "text":
        return _convert_text(node)
    if not isinstance(node_type, str) or not node_type:
        raise ParsingError("Rich-text node is missing its nodeType")

    data = node.get("data") or {}
    properties: dict[str, Any] = {}
    if node_type == "hyperlink":
        properties["href"] = str(data.get("uri", ""))
    else:
        target_id = _target_id(data)
        if target_id is not None:
            properties["id"] = target_id

    children = [_convert(child) for child in node.get("content") or []]
    return Element(tag_name=NODE_TAGS.get(node_type, node_type), properties=properties, children=children)


def rich_text_to_hast(document: Mapping[str, Any]) -> Root:
    """Convert a Contentful rich-text document to an input tree.

    Parameters
    ----------
    document : mapping
        Rich-text JSON whose ``nodeType`` is ``"document"``

    Returns
    -------
    Root
        Input tree; the document's ``content`` becomes the root's children

    Raises
    ------
    ParsingError
        If ``document`` is not a rich-text document or holds malformed nodes

    Examples
    --------
    >>> tree = rich_text_to_hast({
    ...     "nodeType": "document",
    ...     "data": {},
    ...     "content": [{"nodeType": "paragraph", "data": {}, "content": [
    ...         {"nodeType": "text", "value": "hi", "marks": [{"type": "bold"}], "data": {}}
    ...     ]}],
    ... })
    >>> tree.children[0].children[0].tag_name
    'strong'

    """
    if not isinstance(document, Mapping) or document.get("nodeType") != DOCUMENT_NODE_TYPE:
        raise ParsingError("Expected a rich-text document with nodeType 'document'")
    return Root(children=[_convert(child) for child in document.get("content") or []])


__all__ = ["rich_text_to_hast", "NODE_TAGS", "MARK_TAGS", "DOCUMENT_NODE_TYPE"]
