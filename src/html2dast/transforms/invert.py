#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/transforms/invert.py
"""Inversion of anchors that wrap headings.

A link cannot contain a heading in the output format, but a heading may
contain a link. ``<a href="/x"><h1>Title</h1>more</a>`` is therefore
rewritten so that every heading wraps its own copy of the anchor:

    <a href="/x"><h1><a href="/x">Title</a></h1><a href="/x">more</a></a>

The outer anchor is then treated as transparent by the link handler.

"""

from __future__ import annotations

import logging
from dataclasses import replace

from html2dast.constants import HEADING_TAGS
from html2dast.hast.nodes import Element, HastNode

logger = logging.getLogger(__name__)


def _is_heading(node: HastNode) -> bool:
    return isinstance(node, Element) and node.tag_name in HEADING_TAGS


def _clone_anchor(anchor: Element, children: list[HastNode]) -> Element:
    return replace(anchor, properties=dict(anchor.properties), children=children)


def invert_link_headings(anchor: Element) -> bool:
    """Rewrite ``anchor`` in place when it directly contains headings.

    Each heading child is replaced by a copy of the heading whose content is
    wrapped in a copy of the anchor. Each run of consecutive non-heading
    children is wrapped in a single copy of the anchor.

    Parameters
    ----------
    anchor : Element
        The ``a`` element to inspect

    Returns
    -------
    bool
        True when the children were rewritten

    Notes
    -----
    Only direct children are inspected; a heading nested deeper inside the
    anchor is left where it is.

    """
    if not any(_is_heading(child) for child in anchor.children):
        return False

    split_children: list[HastNode] = []
    run: list[HastNode] = []

    for child in anchor.children:
        if _is_heading(child):
            if run:
                split_children.append(_clone_anchor(anchor, run))
                run = []
            heading = replace(child, children=[_clone_anchor(anchor, list(child.children))])
            split_children.append(heading)
        else:
            run.append(child)

    if run:
        split_children.append(_clone_anchor(anchor, run))

    anchor.children = split_children
    logger.debug(f"Moved link to {anchor.properties.get('href')!r} inside its heading(s)")
    return True


__all__ = ["invert_link_headings"]
