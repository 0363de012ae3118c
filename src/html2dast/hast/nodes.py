#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/hast/nodes.py
"""Input tree node classes.

The converter consumes an HTML-derived element tree made of exactly three
node kinds:

    - Root: the document root, holding children
    - Element: a tag with a property mapping and children
    - Text: a literal run of text

Trees can be built directly, produced from a parsed BeautifulSoup document
(:mod:`html2dast.hast.soup`), or loaded from a JSON-like mapping with
:func:`from_dict`.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Mapping, Optional, Union

from html2dast.exceptions import ParsingError

# Node kinds that may appear in serialized trees but carry no content
_IGNORED_TYPES = frozenset({"comment", "doctype", "raw"})


@dataclass
class Text:
    """Literal text run."""

    type: ClassVar[str] = "text"
    value: str = ""


@dataclass
class Element:
    """Element node.

    Parameters
    ----------
    tag_name : str
        Lowercase tag name (``"p"``, ``"a"``, ...)
    properties : dict, default = empty dict
        Element attributes; ``class`` is stored as ``className`` (a list of str)
    children : list of HastNode, default = empty list
        Child nodes in document order

    """

    type: ClassVar[str] = "element"
    tag_name: str = ""
    properties: dict[str, Any] = field(default_factory=dict)
    children: list[HastNode] = field(default_factory=list)


@dataclass
class Root:
    """Document root."""

    type: ClassVar[str] = "root"
    children: list[HastNode] = field(default_factory=list)


HastNode = Union[Root, Element, Text]
HastParent = Union[Root, Element]


def h(tag_name: str, properties: Optional[Mapping[str, Any]] = None, *children: Union[HastNode, str]) -> Element:
    """Build an element, turning plain strings into text nodes.

    Parameters
    ----------
    tag_name : str
        Tag name of the element
    properties : mapping, optional
        Element properties
    *children : HastNode or str
        Children; strings become :class:`Text` nodes

    Returns
    -------
    Element
        The new element

    Examples
    --------
    >>> h("p", None, "hello").children
    [Text(value='hello')]

    """
    return Element(
        tag_name=tag_name,
        properties=dict(properties or {}),
        children=[Text(child) if isinstance(child, str) else child for child in children],
    )


def is_element(node: Any, *tag_names: str) -> bool:
    """Return True if ``node`` is an element, optionally with one of ``tag_names``."""
    if not isinstance(node, Element):
        return False
    return not tag_names or node.tag_name in tag_names


def class_names(node: Element) -> list[str]:
    """Return the element's class list, accepting a string or list ``className``."""
    value = node.properties.get("className")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(name) for name in value]


def to_text(node: HastNode) -> str:
    """Return the text content of ``node``.

    Text values are concatenated in document order and ``br`` elements
    contribute a newline.
    """
    if isinstance(node, Text):
        return node.value
    if isinstance(node, Element) and node.tag_name == "br":
        return "\n"
    return "".join(to_text(child) for child in node.children)


def walk(node: HastNode) -> Iterator[HastNode]:
    """Yield ``node`` and all of its descendants in pre-order."""
    yield node
    if not isinstance(node, Text):
        for child in list(node.children):
            yield from walk(child)


def find(node: HastNode, tag_name: str) -> Optional[Element]:
    """Return the first element named ``tag_name`` in pre-order, or None."""
    for candidate in walk(node):
        if isinstance(candidate, Element) and candidate.tag_name == tag_name:
            return candidate
    return None


def from_dict(data: Mapping[str, Any]) -> HastNode:
    """Build an input tree from a JSON-like mapping in hast shape.

    Comment, doctype and raw nodes are skipped. Element keys may use either
    ``tagName`` or ``tag_name``.

    Parameters
    ----------
    data : mapping
        Serialized node with a ``type`` key

    Returns
    -------
    HastNode
        The deserialized node

    Raises
    ------
    ParsingError
        If the mapping is not a recognizable hast node

    """
    if not isinstance(data, Mapping):
        raise ParsingError(f"Expected a mapping for a hast node, got {type(data).__name__}")

    node_type = data.get("type")
    if node_type == "text":
        return Text(value=str(data.get("value", "")))
    if node_type in ("root", "element"):
        children = [
            from_dict(child)
            for child in data.get("children", [])
            if not (isinstance(child, Mapping) and child.get("type") in _IGNORED_TYPES)
        ]
        if node_type == "root":
            return Root(children=children)
        tag_name = data.get("tagName", data.get("tag_name"))
        if not isinstance(tag_name, str) or not tag_name:
            raise ParsingError("Element node is missing its tag name")
        return Element(tag_name=tag_name.lower(), properties=dict(data.get("properties") or {}), children=children)

    raise ParsingError(f"Unsupported hast node type: {node_type!r}")


def to_dict(node: HastNode) -> dict[str, Any]:
    """Serialize an input tree to its JSON-like hast shape."""
    if isinstance(node, Text):
        return {"type": "text", "value": node.value}
    children = [to_dict(child) for child in node.children]
    if isinstance(node, Root):
        return {"type": "root", "children": children}
    return {"type": "element", "tagName": node.tag_name, "properties": dict(node.properties), "children": children}


__all__ = [
    "Root",
    "Element",
    "Text",
    "HastNode",
    "HastParent",
    "h",
    "is_element",
    "class_names",
    "to_text",
    "walk",
    "find",
    "from_dict",
    "to_dict",
]
