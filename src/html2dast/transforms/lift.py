#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/transforms/lift.py
"""Relocation of block-level leaf elements out of their ancestors.

Some elements (images, embedded assets) can only become top-level blocks in
the output, yet HTML often nests them inside paragraphs, headings or list
items. :func:`lift_nodes` moves each such element up to the container level,
splitting every ancestor on the way at the point where the element was:

    <body><p>before<img>after</p></body>

becomes

    <body><p>before</p><img><p>after</p></body>

The passes here mutate the input tree and are meant to run as a
``preprocess`` hook, before conversion.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from html2dast.constants import ASSET_TAGS
from html2dast.hast.nodes import Element, HastNode, HastParent, Root, Text, find, is_element

logger = logging.getLogger(__name__)

Predicate = Callable[[HastNode], bool]

# (node, index in its parent, ancestor chain starting at the container)
Match = tuple[HastNode, int, list[HastParent]]


def _collect_matches(node: HastNode, ancestors: list[HastParent], predicate: Predicate, found: list[Match]) -> None:
    """Record ``(node, index, ancestors)`` for the outermost matches below ``node``, in document order."""
    if isinstance(node, Text):
        return
    chain = ancestors + [node]
    for index, child in enumerate(node.children):
        if predicate(child):
            found.append((child, index, chain))
        else:
            _collect_matches(child, chain, predicate, found)


def _index_of(children: list[HastNode], node: HastNode) -> int:
    # identity lookup; dataclass equality would match look-alike siblings
    for index, child in enumerate(children):
        if child is node:
            return index
    raise ValueError("node is not a child of its recorded parent")


def _lift(node: HastNode, index: int, ancestors: list[HastParent]) -> None:
    """Move ``node`` to the level of ``ancestors[0]``, splitting what lies between."""
    ancestors[-1].children.pop(index)
    split_at = index

    for depth in range(len(ancestors) - 1, 0, -1):
        current = ancestors[depth]
        grandparent = ancestors[depth - 1]

        after = current.children[split_at:]
        del current.children[split_at:]

        position = _index_of(grandparent.children, current)
        insert_at = position + 1

        if depth == 1:
            grandparent.children.insert(insert_at, node)
            insert_at += 1

        if after:
            clone = replace(current, children=after)
            if isinstance(clone, Element):
                clone.properties = dict(current.properties)
            grandparent.children.insert(insert_at, clone)

        if current.children:
            split_at = position + 1
        else:
            del grandparent.children[position]
            split_at = position


def lift_nodes(tree: HastParent, predicate: Predicate, container: Optional[HastParent] = None) -> int:
    """Lift every node matching ``predicate`` to the container level.

    Parameters
    ----------
    tree : HastParent
        Tree to rewrite in place
    predicate : callable
        Returns True for nodes that must be lifted
    container : HastParent, optional
        Node whose direct children receive the lifted nodes; defaults to
        ``tree``

    Returns
    -------
    int
        Number of nodes that were moved

    Notes
    -----
    Matching nodes that are already direct children of the container are
    left alone, and a match inside another match moves with it. Ancestors
    left empty by the move are removed; the part of each ancestor after the
    moved node goes to a copy of that ancestor placed right after it.

    Matches are collected in one walk and lifted last to first, so the
    recorded positions of the earlier ones stay valid.

    """
    container = container if container is not None else tree
    matches: list[Match] = []
    _collect_matches(container, [], predicate, matches)

    moved = 0
    for node, index, ancestors in reversed(matches):
        if len(ancestors) > 1:
            _lift(node, index, ancestors)
            moved += 1

    if moved:
        logger.debug(f"Lifted {moved} node(s) to the top level")
    return moved


def lift_images(tree: HastParent) -> int:
    """Lift ``img`` elements to the top level of ``body``, or of the root when there is no body."""
    body = find(tree, "body") if isinstance(tree, (Root, Element)) else None
    return lift_nodes(tree, lambda node: is_element(node, "img"), container=body or tree)


def lift_assets(tree: HastParent) -> int:
    """Lift embedded asset elements to the top level of the document."""
    return lift_nodes(tree, lambda node: is_element(node, *ASSET_TAGS))


__all__ = ["lift_nodes", "lift_images", "lift_assets", "ASSET_TAGS"]
