"""Test utilities for the html2dast test suite.

This module provides a schema validator for output trees, tree query helpers
and shortcuts for running conversions from synchronous tests.
"""

from typing import Any, Optional

from html2dast import ConversionOptions, StructuredTextDocument, html_to_structured_text_sync
from html2dast.constants import MARKS
from html2dast.dast.nodes import Node, get_children
from html2dast.dast.schema import ALLOWED_ATTRIBUTES, allowed_children


def validate(document: Optional[Any]) -> tuple[bool, Optional[str]]:
    """Check an output tree against the dast constraint table.

    Parameters
    ----------
    document : StructuredTextDocument, Node or None
        The tree to check; None counts as a valid empty result

    Returns
    -------
    tuple
        (valid, message); message names the first violation found

    """
    if document is None:
        return True, None
    if isinstance(document, StructuredTextDocument):
        if document.schema != "dast":
            return False, f"unexpected schema {document.schema!r}"
        document = document.document
    if document.type != "root":
        return False, f"document root has type {document.type!r}"
    return _validate_node(document)


def _validate_node(node: Node) -> tuple[bool, Optional[str]]:
    serialized = node.to_dict()
    for key in serialized:
        if key != "type" and key not in ALLOWED_ATTRIBUTES[node.type]:
            return False, f"{node.type} has disallowed attribute {key!r}"

    for mark in serialized.get("marks", []):
        if mark not in MARKS:
            return False, f"span has unknown mark {mark!r}"

    allowed = allowed_children(node.type)
    for child in get_children(node):
        if child.type not in allowed:
            return False, f"{child.type} is not allowed in {node.type}"
        valid, message = _validate_node(child)
        if not valid:
            return valid, message
    return True, None


def find_all(node: Any, node_type: str) -> list[Node]:
    """Return every node of ``node_type`` below ``node`` (inclusive), in pre-order."""
    if isinstance(node, StructuredTextDocument):
        node = node.document
    found = [node] if node.type == node_type else []
    for child in get_children(node):
        found.extend(find_all(child, node_type))
    return found


def find(node: Any, node_type: str) -> Optional[Node]:
    """Return the first node of ``node_type`` below ``node`` (inclusive), or None."""
    matches = find_all(node, node_type)
    return matches[0] if matches else None


def span_text(node: Any) -> str:
    """Concatenate the values of all spans below ``node``."""
    return "".join(span.value for span in find_all(node, "span"))


def child_types(node: Any) -> list[str]:
    """Return the types of the direct children of ``node``."""
    if isinstance(node, StructuredTextDocument):
        node = node.document
    return [child.type for child in get_children(node)]


def convert(html: str, **options: Any) -> Optional[StructuredTextDocument]:
    """Convert ``html`` synchronously, building ConversionOptions from keyword arguments."""
    return html_to_structured_text_sync(html, ConversionOptions(**options))
