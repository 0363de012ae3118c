#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/hast/minify.py
"""Whitespace collapsing for input trees.

HTML source whitespace is mostly insignificant: runs of spaces and newlines
render as a single space, and whitespace at the start or end of a block is
not rendered at all. :func:`minify_whitespace` applies those rules to the
text nodes of a tree so that indentation in the source does not end up as
spans in the output.

Preformatted elements keep their whitespace untouched.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from html2dast.constants import INLINE_ELEMENTS, PREFORMATTED_ELEMENTS
from html2dast.hast.nodes import Element, HastNode, HastParent, Text

_WHITESPACE_RE = re.compile(r"[ \t\n\r\f]+")

# Raw-text elements are left as they are, like preformatted ones
_SKIPPED_ELEMENTS = PREFORMATTED_ELEMENTS | {"script", "style"}


@dataclass
class _State:
    # True at the start of a block and after whitespace or a line break
    after_space: bool = True
    last_text: Optional[Text] = None


def _collapse(value: str, newlines: bool) -> str:
    if newlines:
        return _WHITESPACE_RE.sub(lambda match: "\n" if "\n" in match.group(0) else " ", value)
    return _WHITESPACE_RE.sub(" ", value)


def _trim_trailing(state: _State) -> None:
    if state.last_text is not None:
        state.last_text.value = state.last_text.value.rstrip(" \n")
    state.last_text = None


def _end_block(state: _State) -> None:
    _trim_trailing(state)
    state.after_space = True


def _minify(node: HastNode, state: _State, newlines: bool) -> None:
    if isinstance(node, Text):
        value = _collapse(node.value, newlines)
        if state.after_space:
            value = value.lstrip(" \n")
        node.value = value
        if value:
            state.after_space = value[-1] in " \n"
            state.last_text = node
        return

    if isinstance(node, Element):
        if node.tag_name == "br":
            _end_block(state)
            return
        if node.tag_name in _SKIPPED_ELEMENTS:
            _end_block(state)
            return
        if node.tag_name in INLINE_ELEMENTS:
            if not node.children:
                # replaced content such as an image
                state.after_space = False
                state.last_text = None
            for child in node.children:
                _minify(child, state, newlines)
            return

    _end_block(state)
    for child in node.children:
        _minify(child, state, newlines)
    _end_block(state)


def _drop_empty_text(node: HastParent) -> None:
    node.children = [child for child in node.children if not (isinstance(child, Text) and not child.value)]
    for child in node.children:
        if isinstance(child, Element) and child.tag_name not in _SKIPPED_ELEMENTS:
            _drop_empty_text(child)


def minify_whitespace(tree: HastParent, newlines: bool = False) -> None:
    """Collapse insignificant whitespace in ``tree`` in place.

    Parameters
    ----------
    tree : HastParent
        Tree to rewrite
    newlines : bool, default = False
        Collapse whitespace runs that contain a line break to ``"\\n"``
        instead of a space

    Notes
    -----
    Leading whitespace is removed at the start of a block and after a line
    break; trailing whitespace is removed at the end of a block and before a
    line break. Text nodes left empty are deleted.

    """
    _minify(tree, _State(), newlines)
    _drop_empty_text(tree)


__all__ = ["minify_whitespace"]
