#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/engine/handlers.py
"""Built-in handlers converting HTML elements to dast nodes.

Every handler has the signature ``handler(create_node, node, context)`` and
returns None, one node, or a list of nodes. Structural handlers first check
whether their output type may appear under ``context.parent_node_type`` and
is enabled by ``context.allowed_blocks``. When it may, they convert their
children with themselves as the new parent type. When it may not, they return
the converted children in place of the node (demotion).

"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from html2dast.dast.nodes import Node
from html2dast.dast.schema import accepts_inline, is_allowed_child
from html2dast.engine.context import Context, CreateNode, Handler
from html2dast.engine.visitor import visit_children
from html2dast.engine.wrap import wrap, wrap_list_items
from html2dast.hast.nodes import Element, Root, Text, class_names, is_element, to_text
from html2dast.transforms.invert import invert_link_headings

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r?\n|\r")
_RELATIVE_URL_RE = re.compile(r"^\.?/")

# Parent types where an out-of-place link is still emitted; the
# surrounding root/list handler wraps it later.
_LINK_WRAPPABLE_PARENTS = ("root", "list", "listItem")

_LINK_META_ATTRIBUTES = ("target", "rel", "title")


# =============================================================================
# Helpers
# =============================================================================


def wrap_text(context: Context, value: str) -> str:
    """Replace newlines with spaces when the context disables text wrapping."""
    return value if context.wrap_text else _NEWLINE_RE.sub(" ", value)


def resolve_url(context: Context, url: Optional[str]) -> str:
    """Resolve ``url`` against the document's base URL.

    Parameters
    ----------
    context : Context
        Traversal context holding the discovered base URL
    url : str or None
        The link target as written in the document

    Returns
    -------
    str
        Empty string for a missing URL, the URL unchanged when no base URL
        is known, otherwise the absolute URL

    Notes
    -----
    Paths starting with ``/`` or ``./`` are kept under the base path, so with
    a base of ``https://example.com/docs`` the target ``/intro`` resolves to
    ``https://example.com/docs/intro``.

    """
    if url is None:
        return ""

    base_url = context.global_context.base_url
    if not base_url:
        return url

    resolved = urljoin(base_url, url)
    if _RELATIVE_URL_RE.match(url):
        base_path = urlsplit(base_url).path
        parts = urlsplit(resolved)
        if not parts.path.startswith(base_path):
            resolved = urlunsplit(parts._replace(path=f"{base_path}{parts.path}"))
    return resolved


def _property_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def _link_meta(node: Element) -> Optional[list[dict[str, str]]]:
    meta = [
        {"id": name, "value": _property_text(node.properties[name])}
        for name in _LINK_META_ATTRIBUTES
        if node.properties.get(name)
    ]
    return meta or None


def _is_blank_span(node: Node) -> bool:
    return node.type == "span" and not getattr(node, "value", "").strip()


def _code_language(node: Element, prefix: str) -> Optional[str]:
    if node.tag_name == "pre":
        source = next(
            (child for child in node.children if is_element(child, "code") and "className" in child.properties),
            None,
        )
    elif node.tag_name == "code" and "className" in node.properties:
        source = node
    else:
        source = None

    if source is None:
        return None
    for name in class_names(source):
        if name.startswith(prefix):
            return name[len(prefix) :]
    return None


# =============================================================================
# Structural handlers
# =============================================================================


async def root(create_node: CreateNode, node: Root, context: Context) -> Optional[Node]:
    """Convert the document root.

    Returns None when the document has no content besides whitespace.
    """
    children = await visit_children(create_node, node, context.derive(parent_node_type="root"))

    if not children or all(_is_blank_span(child) for child in children):
        return None

    if any(not is_allowed_child("root", child.type) for child in children):
        children = wrap(children)

    return create_node("root", children=children)


async def paragraph(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert ``p`` and ``summary`` elements."""
    is_allowed = is_allowed_child(context.parent_node_type, "paragraph")

    children = await visit_children(
        create_node,
        node,
        context.derive(parent_node_type="paragraph" if is_allowed else context.parent_node_type),
    )

    if not children:
        return None
    return create_node("paragraph", children=children) if is_allowed else children


async def heading(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert ``h1`` to ``h6``; newlines inside a heading become spaces."""
    is_allowed = (
        is_allowed_child(context.parent_node_type, "heading") and "heading" in context.allowed_blocks
    )

    children = await visit_children(
        create_node,
        node,
        context.derive(
            parent_node_type="heading" if is_allowed else context.parent_node_type,
            wrap_text=False if is_allowed else context.wrap_text,
        ),
    )

    if not children:
        return None
    if not is_allowed:
        logger.debug(f"<{node.tag_name}> not allowed in {context.parent_node_type}, keeping its content")
        return children

    level_digit = node.tag_name[1:2]
    level = int(level_digit) if level_digit.isdigit() and 1 <= int(level_digit) <= 6 else 1
    return create_node("heading", level=level, children=children)


async def code(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert preformatted and code elements.

    Out of block position the element becomes an inline ``code`` mark. When
    code blocks are disabled its children are converted as they are.
    """
    if not is_allowed_child(context.parent_node_type, "code"):
        return await inline_code(create_node, node, context)

    if "code" not in context.allowed_blocks:
        return await visit_children(create_node, node, context)

    props: dict[str, Any] = {"code": wrap_text(context, to_text(node)).rstrip("\n")}
    language = _code_language(node, context.code_prefix)
    if language is not None:
        props["language"] = language

    return create_node("code", **props)


async def blockquote(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert ``blockquote`` elements."""
    is_allowed = (
        is_allowed_child(context.parent_node_type, "blockquote") and "blockquote" in context.allowed_blocks
    )

    children = await visit_children(
        create_node,
        node,
        context.derive(parent_node_type="blockquote" if is_allowed else context.parent_node_type),
    )

    if not children:
        return None
    return create_node("blockquote", children=wrap(children)) if is_allowed else children


async def list_(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert ``ul``, ``ol`` and ``dir`` elements."""
    is_allowed = is_allowed_child(context.parent_node_type, "list") and "list" in context.allowed_blocks

    if not is_allowed:
        logger.debug(f"<{node.tag_name}> not allowed in {context.parent_node_type}, keeping its content")
        return await visit_children(create_node, node, context)

    children = await wrap_list_items(create_node, node, context.derive(parent_node_type="list"))

    if not children:
        return None
    return create_node("list", children=children, style="numbered" if node.tag_name == "ol" else "bulleted")


async def list_item(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert ``li``, ``dt`` and ``dd`` elements."""
    is_allowed = is_allowed_child(context.parent_node_type, "listItem") and "list" in context.allowed_blocks

    children = await visit_children(
        create_node,
        node,
        context.derive(parent_node_type="listItem" if is_allowed else context.parent_node_type),
    )

    if not children:
        return None
    return create_node("listItem", children=wrap(children)) if is_allowed else children


async def link(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Convert anchors.

    An anchor that directly contains headings is restructured so that each
    heading wraps a copy of the anchor, and the anchor itself is dropped.
    """
    if "link" not in context.allowed_blocks:
        return await visit_children(create_node, node, context)

    if accepts_inline(context.parent_node_type):
        is_allowed = True
    else:
        is_allowed = is_allowed_child(context.parent_node_type, "link")

    if not is_allowed:
        is_allowed = context.parent_node_type in _LINK_WRAPPABLE_PARENTS

    if invert_link_headings(node):
        is_allowed = False

    children = await visit_children(
        create_node,
        node,
        context.derive(parent_node_type="link" if is_allowed else context.parent_node_type),
    )

    if not children:
        return None
    if not is_allowed:
        return children

    props: dict[str, Any] = {"url": resolve_url(context, node.properties.get("href")), "children": children}
    meta = _link_meta(node)
    if meta is not None:
        props["meta"] = meta
    return create_node("link", **props)


async def thematic_break(create_node: CreateNode, node: Element, context: Context) -> Optional[Node]:
    """Convert ``hr``; dropped where a thematic break cannot appear."""
    if is_allowed_child(context.parent_node_type, "thematicBreak"):
        return create_node("thematicBreak")
    return None


async def embedded_block(create_node: CreateNode, node: Element, context: Context) -> Optional[Node]:
    """Convert an embedded asset reference to a ``block`` node.

    The referenced item is read from the ``id`` property. A reference that is
    not at the top level is dropped; lift it first with
    :func:`html2dast.transforms.lift_assets`.
    """
    item = node.properties.get("id")
    if not item:
        logger.debug(f"<{node.tag_name}> without an id, skipping")
        return None
    if not is_allowed_child(context.parent_node_type, "block"):
        logger.debug(f"<{node.tag_name}> {item!r} not allowed in {context.parent_node_type}, dropping it")
        return None
    return create_node("block", item=str(item))


# =============================================================================
# Inline handlers
# =============================================================================


async def span(create_node: CreateNode, node: Text, context: Context) -> Node:
    """Convert a text node to a span carrying the active marks."""
    props: dict[str, Any] = {"value": wrap_text(context, node.value)}
    marks = context.active_marks
    if marks:
        props["marks"] = marks
    return create_node("span", **props)


async def line_break(create_node: CreateNode, node: Element, context: Context) -> Node:
    """Convert ``br`` to a newline span."""
    return await span(create_node, Text("\n"), context)


def with_mark(mark: str) -> Handler:
    """Build a handler that adds ``mark`` to the text inside the element.

    When the mark is not allowed the element's children are converted
    unchanged.
    """

    async def mark_handler(create_node: CreateNode, node: Element, context: Context) -> list[Node]:
        if mark not in context.allowed_marks:
            return await visit_children(create_node, node, context)
        return await visit_children(create_node, node, context.with_mark(mark))

    mark_handler.__name__ = f"{mark}_mark"
    return mark_handler


inline_code = with_mark("code")
strong = with_mark("strong")
italic = with_mark("emphasis")
underline = with_mark("underline")
strikethrough = with_mark("strikethrough")
highlight = with_mark("highlight")


def _style_marks(style: str) -> list[str]:
    marks = []
    for declaration in style.split(";"):
        prop, _, value = declaration.partition(":")
        prop = prop.strip().lower()
        value = value.strip().lower()
        if prop == "font-weight":
            if value == "bold" or (value.isdigit() and int(value) > 400):
                marks.append("strong")
        elif prop == "font-style":
            if value == "italic":
                marks.append("emphasis")
        elif prop == "text-decoration":
            if value == "underline":
                marks.append("underline")
    return marks


async def extract_inline_styles(create_node: CreateNode, node: Element, context: Context) -> list[Node]:
    """Convert ``span`` elements, turning inline CSS into marks.

    ``font-weight`` of ``bold`` or above 400 gives ``strong``, ``font-style:
    italic`` gives ``emphasis`` and ``text-decoration: underline`` gives
    ``underline``.
    """
    style = node.properties.get("style")
    if isinstance(style, str):
        for mark in _style_marks(style):
            if mark in context.allowed_marks:
                context = context.with_mark(mark)
    return await visit_children(create_node, node, context)


# =============================================================================
# Document metadata
# =============================================================================


async def head(create_node: CreateNode, node: Element, context: Context) -> Any:
    """Look for a ``base`` element in the document head; nothing else is kept."""
    base_element = next((child for child in node.children if is_element(child, "base")), None)
    if base_element is None:
        return None
    return context.handlers["base"](create_node, base_element, context)


async def base(create_node: CreateNode, node: Element, context: Context) -> None:
    """Record the first ``<base href>`` as the URL base for links."""
    shared = context.global_context
    href = node.properties.get("href")
    if not shared.base_url_found and href:
        shared.base_url = re.sub(r"/$", "", str(href))
        shared.base_url_found = True
        logger.debug(f"Using base URL {shared.base_url}")
    return None


async def noop(create_node: CreateNode, node: Any, context: Context) -> None:
    """Drop the element and everything inside it."""
    return None


DEFAULT_HANDLERS: dict[str, Handler] = {
    "root": root,
    "p": paragraph,
    "summary": paragraph,
    "h1": heading,
    "h2": heading,
    "h3": heading,
    "h4": heading,
    "h5": heading,
    "h6": heading,
    "ul": list_,
    "ol": list_,
    "dir": list_,
    "dt": list_item,
    "dd": list_item,
    "li": list_item,
    "listing": code,
    "plaintext": code,
    "pre": code,
    "xmp": code,
    "blockquote": blockquote,
    "a": link,
    "code": code,
    "kbd": code,
    "samp": code,
    "tt": code,
    "var": code,
    "strong": strong,
    "b": strong,
    "em": italic,
    "i": italic,
    "u": underline,
    "strike": strikethrough,
    "s": strikethrough,
    "mark": highlight,
    "base": base,
    "span": extract_inline_styles,
    "text": span,
    "br": line_break,
    "hr": thematic_break,
    "asset": embedded_block,
    "embedded-asset-block": embedded_block,
    "head": head,
    "comment": noop,
    "script": noop,
    "style": noop,
    "title": noop,
    "video": noop,
    "audio": noop,
    "embed": noop,
    "iframe": noop,
    "meta": noop,
    "link": noop,
    "noscript": noop,
    "template": noop,
}

__all__ = [
    "DEFAULT_HANDLERS",
    "root",
    "paragraph",
    "heading",
    "code",
    "blockquote",
    "list_",
    "list_item",
    "link",
    "thematic_break",
    "embedded_block",
    "span",
    "line_break",
    "with_mark",
    "inline_code",
    "strong",
    "italic",
    "underline",
    "strikethrough",
    "highlight",
    "extract_inline_styles",
    "head",
    "base",
    "noop",
    "resolve_url",
    "wrap_text",
]
