#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/dast/nodes.py
"""Output node classes for the dast structured-text format.

Each node type of the target schema is a dataclass with a ``type`` class
attribute matching its name in the serialized JSON shape. Handlers never
instantiate these classes directly; they receive :func:`create_node`, which
checks the requested type and attributes against the constraint table.

Node Hierarchy
--------------
Block-level nodes:
    - Root, Paragraph, Heading, List, ListItem
    - Blockquote, Code, Block, ThematicBreak

Inline nodes:
    - Span, Link, ItemLink, InlineItem

"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Literal, Optional

from html2dast.constants import DAST_SCHEMA
from html2dast.dast.schema import ALLOWED_ATTRIBUTES
from html2dast.exceptions import SchemaError

ListStyle = Literal["bulleted", "numbered"]
MetaEntry = dict[str, str]


class Node:
    """Base class for all output nodes.

    Subclasses are dataclasses and set ``type`` to their schema name.
    """

    type: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the node to its canonical JSON-compatible shape.

        Optional attributes set to None are omitted.

        Returns
        -------
        dict
            Mapping with ``type`` first, followed by the node's attributes

        """
        data: dict[str, Any] = {"type": self.type}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "children":
                data["children"] = [child.to_dict() for child in value]
            elif isinstance(value, list):
                data[f.name] = [dict(entry) if isinstance(entry, dict) else entry for entry in value]
            else:
                data[f.name] = value
        return data


@dataclass
class Root(Node):
    """Document root containing block-level nodes."""

    type: ClassVar[str] = "root"
    children: list[Node] = field(default_factory=list)


@dataclass
class Paragraph(Node):
    """Paragraph containing inline nodes."""

    type: ClassVar[str] = "paragraph"
    children: list[Node] = field(default_factory=list)


@dataclass
class Heading(Node):
    """Heading node with a level from 1 to 6.

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing the heading text

    """

    type: ClassVar[str] = "heading"
    level: int = 1
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise SchemaError(f"Heading level must be 1-6, got {self.level}", node_type=self.type, attribute="level")


@dataclass
class List(Node):
    """List node holding list items.

    Parameters
    ----------
    style : {"bulleted", "numbered"}, default = "bulleted"
        Marker style of the list
    children : list of ListItem, default = empty list
        The list items

    """

    type: ClassVar[str] = "list"
    style: ListStyle = "bulleted"
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate the list style."""
        if self.style not in ("bulleted", "numbered"):
            raise SchemaError(f"Unknown list style: {self.style!r}", node_type=self.type, attribute="style")


@dataclass
class ListItem(Node):
    """List item containing paragraphs and nested lists."""

    type: ClassVar[str] = "listItem"
    children: list[Node] = field(default_factory=list)


@dataclass
class Blockquote(Node):
    """Block quotation with an optional attribution line."""

    type: ClassVar[str] = "blockquote"
    children: list[Node] = field(default_factory=list)
    attribution: Optional[str] = None


@dataclass
class Code(Node):
    """Code block.

    Parameters
    ----------
    code : str
        The literal code text
    language : str or None, default = None
        Language identifier taken from the element's class name
    highlight : list of int or None, default = None
        Zero-based line numbers to highlight

    """

    type: ClassVar[str] = "code"
    code: str = ""
    language: Optional[str] = None
    highlight: Optional[list[int]] = None


@dataclass
class Link(Node):
    """Hyperlink wrapping inline content.

    Parameters
    ----------
    url : str
        Link target, already resolved against the document base URL
    children : list of Node, default = empty list
        Inline content of the link
    meta : list of dict or None, default = None
        ``{"id": ..., "value": ...}`` entries for target, rel and title

    """

    type: ClassVar[str] = "link"
    url: str = ""
    children: list[Node] = field(default_factory=list)
    meta: Optional[list[MetaEntry]] = None


@dataclass
class ItemLink(Node):
    """Link to a record, identified by ``item``."""

    type: ClassVar[str] = "itemLink"
    item: str = ""
    children: list[Node] = field(default_factory=list)
    meta: Optional[list[MetaEntry]] = None


@dataclass
class InlineItem(Node):
    """Inline reference to a record."""

    type: ClassVar[str] = "inlineItem"
    item: str = ""


@dataclass
class Span(Node):
    """Run of text with optional marks.

    Parameters
    ----------
    value : str
        The text content
    marks : list of str or None, default = None
        Formatting marks applied to the whole run

    """

    type: ClassVar[str] = "span"
    value: str = ""
    marks: Optional[list[str]] = None


@dataclass
class Block(Node):
    """Block-level record embed, identified by ``item``."""

    type: ClassVar[str] = "block"
    item: str = ""


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    type: ClassVar[str] = "thematicBreak"


NODE_CLASSES: dict[str, type[Node]] = {
    cls.type: cls
    for cls in (
        Root,
        Paragraph,
        Heading,
        List,
        ListItem,
        Blockquote,
        Code,
        Link,
        ItemLink,
        InlineItem,
        Span,
        Block,
        ThematicBreak,
    )
}


def create_node(node_type: str, **props: Any) -> Node:
    """Build an output node of ``node_type`` with the given attributes.

    This is the factory handed to every handler.

    Parameters
    ----------
    node_type : str
        Schema name of the node (``"paragraph"``, ``"span"``, ...)
    **props
        Node attributes; each key must be allowed for the type

    Returns
    -------
    Node
        The new node

    Raises
    ------
    SchemaError
        If the type is unknown or an attribute is not defined for it

    Examples
    --------
    >>> create_node("span", value="hi", marks=["strong"])
    Span(value='hi', marks=['strong'])

    """
    cls = NODE_CLASSES.get(node_type)
    if cls is None:
        raise SchemaError(f"Unknown node type: {node_type!r}", node_type=node_type)

    allowed = ALLOWED_ATTRIBUTES[node_type]
    for key in props:
        if key not in allowed:
            raise SchemaError(
                f"Attribute {key!r} is not allowed on {node_type!r} nodes", node_type=node_type, attribute=key
            )

    if "children" in props:
        props["children"] = list(props["children"])
    return cls(**props)


def get_children(node: Node) -> list[Node]:
    """Return the children list of ``node``, or an empty list for leaves."""
    children = getattr(node, "children", None)
    return children if children is not None else []


@dataclass
class StructuredTextDocument:
    """Wrapper around a converted document.

    Parameters
    ----------
    document : Root
        The output tree
    schema : str, default = "dast"
        Name of the output format

    """

    document: Root
    schema: str = DAST_SCHEMA

    def to_dict(self) -> dict[str, Any]:
        """Serialize as ``{"schema": "dast", "document": {...}}``."""
        return {"schema": self.schema, "document": self.document.to_dict()}


__all__ = [
    "Node",
    "Root",
    "Paragraph",
    "Heading",
    "List",
    "ListItem",
    "Blockquote",
    "Code",
    "Link",
    "ItemLink",
    "InlineItem",
    "Span",
    "Block",
    "ThematicBreak",
    "NODE_CLASSES",
    "StructuredTextDocument",
    "create_node",
    "get_children",
]
