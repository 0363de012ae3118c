#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/engine/__init__.py
"""Conversion engine: traversal context, dispatch, handlers and wrapping."""

from html2dast.engine.context import Context, GlobalContext, Handler
from html2dast.engine.visitor import HandlerRegistry, visit_children, visit_node
from html2dast.engine.wrap import wrap, wrap_list_items

__all__ = [
    "Context",
    "GlobalContext",
    "Handler",
    "HandlerRegistry",
    "visit_children",
    "visit_node",
    "wrap",
    "wrap_list_items",
]
