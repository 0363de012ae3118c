#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/transforms/google_docs.py
"""Cleanup for HTML copied from Google Docs.

Google Docs wraps clipboard content in ``<b id="docs-internal-guid-...">``,
which would otherwise turn the whole document bold. The wrapper is replaced
by its children; the inline styles Docs puts on spans are handled by the
regular ``span`` handler.

"""

from __future__ import annotations

from html2dast.constants import GOOGLE_DOCS_ID_PREFIX
from html2dast.hast.nodes import Element, HastNode, HastParent, Text


def _is_google_docs_wrapper(node: HastNode) -> bool:
    if not isinstance(node, Element) or node.tag_name != "b":
        return False
    node_id = node.properties.get("id")
    return isinstance(node_id, str) and node_id.startswith(GOOGLE_DOCS_ID_PREFIX)


def preprocess_google_docs(tree: HastParent) -> None:
    """Unwrap Google Docs ``<b>`` wrappers in place."""
    index = 0
    while index < len(tree.children):
        child = tree.children[index]
        if _is_google_docs_wrapper(child):
            tree.children[index : index + 1] = child.children
            continue
        if not isinstance(child, Text):
            preprocess_google_docs(child)
        index += 1


__all__ = ["preprocess_google_docs"]
