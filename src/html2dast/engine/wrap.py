#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/engine/wrap.py
"""Paragraph wrapping of stray inline content.

Root, list item and blockquote nodes only accept block children. When their
converted children contain bare inline nodes, every run of consecutive inline
nodes is grouped into a synthetic paragraph.

"""

from __future__ import annotations

from typing import Sequence

from html2dast.dast.nodes import ListItem, Node, Paragraph
from html2dast.dast.schema import is_allowed_child, is_inline
from html2dast.engine.context import Context, CreateNode
from html2dast.engine.visitor import visit_children
from html2dast.hast.nodes import HastParent


def wrap(nodes: Sequence[Node]) -> list[Node]:
    """Group each maximal run of inline nodes into one paragraph.

    Block nodes pass through in order. Whitespace-only runs are wrapped like
    any other run. Wrapping an already wrapped sequence returns an equal
    sequence.

    Parameters
    ----------
    nodes : sequence of Node
        Converted children

    Returns
    -------
    list of Node
        Children with no inline node at the top level

    Examples
    --------
    >>> from html2dast.dast.nodes import Span, ThematicBreak
    >>> wrap([Span("a"), Span("b"), ThematicBreak()])
    [Paragraph(children=[Span(value='a', marks=None), Span(value='b', marks=None)]), ThematicBreak()]

    """
    result: list[Node] = []
    run: list[Node] = []

    for node in nodes:
        if is_inline(node.type):
            run.append(node)
            continue
        if run:
            result.append(Paragraph(children=run))
            run = []
        result.append(node)

    if run:
        result.append(Paragraph(children=run))

    return result


async def wrap_list_items(create_node: CreateNode, node: HastParent, context: Context) -> list[Node]:
    """Convert the children of a list element into list items.

    Converted children that are not list items are wrapped in one; a child
    that a list item cannot hold directly is first put in a paragraph.
    """
    children = await visit_children(create_node, node, context)

    items: list[Node] = []
    for child in children:
        if child.type == "listItem":
            items.append(child)
        elif is_allowed_child("listItem", child.type):
            items.append(ListItem(children=[child]))
        else:
            items.append(ListItem(children=[create_node("paragraph", children=[child])]))
    return items


__all__ = ["wrap", "wrap_list_items"]
