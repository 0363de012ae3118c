#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/dast/schema.py
"""Constraint table for the dast structured-text format.

Every output node type maps to the set of child types it may contain and the
attribute keys it may carry. Types whose children are "any inline content"
map to :data:`INLINE_NODES` instead of an explicit tuple.

"""

from __future__ import annotations

from typing import Final, Literal, Mapping, Union

NodeType = Literal[
    "root",
    "paragraph",
    "heading",
    "list",
    "listItem",
    "blockquote",
    "code",
    "link",
    "itemLink",
    "inlineItem",
    "span",
    "block",
    "thematicBreak",
]

INLINE_NODES: Final = "inlineNodes"

INLINE_NODE_TYPES: tuple[str, ...] = ("span", "link", "itemLink", "inlineItem")

ALLOWED_CHILDREN: Mapping[str, Union[tuple[str, ...], str]] = {
    "blockquote": ("paragraph",),
    "block": (),
    "code": (),
    "heading": INLINE_NODES,
    "inlineItem": (),
    "itemLink": INLINE_NODES,
    "link": INLINE_NODES,
    "listItem": ("paragraph", "list"),
    "list": ("listItem",),
    "paragraph": INLINE_NODES,
    "root": ("blockquote", "code", "list", "paragraph", "heading", "block", "thematicBreak"),
    "span": (),
    "thematicBreak": (),
}

ALLOWED_ATTRIBUTES: Mapping[str, tuple[str, ...]] = {
    "blockquote": ("children", "attribution"),
    "block": ("item",),
    "code": ("language", "highlight", "code"),
    "heading": ("level", "children"),
    "inlineItem": ("item",),
    "itemLink": ("item", "children", "meta"),
    "link": ("url", "children", "meta"),
    "listItem": ("children",),
    "list": ("style", "children"),
    "paragraph": ("children",),
    "root": ("children",),
    "span": ("value", "marks"),
    "thematicBreak": (),
}

NODE_TYPES: tuple[str, ...] = tuple(ALLOWED_CHILDREN)


def allowed_children(node_type: str) -> tuple[str, ...]:
    """Return the concrete child types allowed under ``node_type``.

    The "any inline content" marker is expanded to :data:`INLINE_NODE_TYPES`.
    Unknown types allow nothing.
    """
    children = ALLOWED_CHILDREN.get(node_type, ())
    if children == INLINE_NODES:
        return INLINE_NODE_TYPES
    return children  # type: ignore[return-value]


def is_allowed_child(parent_type: str, child_type: str) -> bool:
    """Return True when ``child_type`` may appear directly under ``parent_type``."""
    return child_type in allowed_children(parent_type)


def accepts_inline(node_type: str) -> bool:
    """Return True when ``node_type`` takes arbitrary inline content."""
    return ALLOWED_CHILDREN.get(node_type) == INLINE_NODES


def is_inline(node_type: str) -> bool:
    """Return True for phrasing node types."""
    return node_type in INLINE_NODE_TYPES


__all__ = [
    "NodeType",
    "INLINE_NODES",
    "INLINE_NODE_TYPES",
    "ALLOWED_CHILDREN",
    "ALLOWED_ATTRIBUTES",
    "NODE_TYPES",
    "allowed_children",
    "is_allowed_child",
    "accepts_inline",
    "is_inline",
]
