#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/dast/__init__.py
"""Output tree model for the dast structured-text format."""

from html2dast.dast.nodes import Node, StructuredTextDocument, create_node
from html2dast.dast.schema import ALLOWED_ATTRIBUTES, ALLOWED_CHILDREN, INLINE_NODE_TYPES

__all__ = [
    "ALLOWED_ATTRIBUTES",
    "ALLOWED_CHILDREN",
    "INLINE_NODE_TYPES",
    "Node",
    "StructuredTextDocument",
    "create_node",
]
