#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/contentful/handlers.py
"""Handler table for converted Contentful rich text.

Rich text has no preformatted block, so editors write code as a paragraph
whose only text carries the ``code`` mark. At the top level such a paragraph
becomes a ``code`` block; everywhere else the built-in handlers apply.

"""

from __future__ import annotations

from typing import Any, Optional

from html2dast.dast.nodes import Paragraph, Span
from html2dast.engine.context import Context, CreateNode, Handler
from html2dast.engine.handlers import DEFAULT_HANDLERS, paragraph
from html2dast.hast.nodes import Element, Root


def _code_span(result: Any) -> Optional[Span]:
    if not isinstance(result, Paragraph) or len(result.children) != 1:
        return None
    only = result.children[0]
    if isinstance(only, Span) and only.marks == ["code"]:
        return only
    return None


async def code_paragraph(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert a paragraph, or a code block for a top-level paragraph of code-marked text."""
    result = await paragraph(create_node, node, context)
    if not isinstance(context.parent_node, Root) or "code" not in context.allowed_blocks:
        return result

    span = _code_span(result)
    if span is None:
        return result
    return create_node("code", code=span.value)


CONTENTFUL_HANDLERS: dict[str, Handler] = {**DEFAULT_HANDLERS, "p": code_paragraph}

__all__ = ["CONTENTFUL_HANDLERS", "code_paragraph"]
