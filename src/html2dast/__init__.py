"""html2dast - Convert HTML into dast structured-text documents.

html2dast turns an HTML-derived element tree into a document in the dast
structured-text format, where every node type has a fixed set of allowed
children, attributes and marks. The converter never produces an invalid
document: elements that cannot appear where they are found are replaced by
their content, moved out of their ancestors, or swapped with their parent.

Key Features
------------
- Async conversion engine with overridable per-tag handlers
- Configurable allowed blocks and marks
- Base URL resolution from ``<base href>``
- Preprocessing passes: image/asset lifting, Google Docs cleanup
- HTML parsing through BeautifulSoup (optional ``html`` extra)
- Contentful rich-text documents as a second input format

Requirements
------------
- Python 3.10+
- beautifulsoup4 for parsing HTML strings (``pip install html2dast[html]``)

Examples
--------
Converting an HTML string:

    >>> from html2dast import html_to_structured_text_sync
    >>> document = html_to_structured_text_sync("<h1>Title</h1><p>Body</p>")
    >>> [node.type for node in document.document.children]
    ['heading', 'paragraph']

Restricting the output and overriding a handler:

    >>> from html2dast import ConversionOptions, hast_to_structured_text
    >>> async def image(create_node, node, context):
    ...     return create_node("block", item=node.properties["src"])
    >>> options = ConversionOptions(allowed_blocks=("list",), handlers={"img": image})
    >>> # await hast_to_structured_text(tree, options)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/__init__.py

from html2dast.api import (
    hast_to_structured_text,
    hast_to_structured_text_sync,
    html_to_structured_text,
    html_to_structured_text_sync,
    rich_text_to_structured_text,
    rich_text_to_structured_text_sync,
)
from html2dast.dast.nodes import StructuredTextDocument, create_node
from html2dast.engine.context import Context, GlobalContext, Handler
from html2dast.engine.handlers import DEFAULT_HANDLERS
from html2dast.engine.visitor import HandlerRegistry, visit_children, visit_node
from html2dast.exceptions import (
    DependencyError,
    Html2DastError,
    InvalidOptionsError,
    ParsingError,
    SchemaError,
    ValidationError,
)
from html2dast.options import ConversionOptions
from html2dast.transforms import invert_link_headings, lift_assets, lift_images, lift_nodes, preprocess_google_docs

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Entry points
    "hast_to_structured_text",
    "hast_to_structured_text_sync",
    "html_to_structured_text",
    "html_to_structured_text_sync",
    "rich_text_to_structured_text",
    "rich_text_to_structured_text_sync",
    # Options and results
    "ConversionOptions",
    "StructuredTextDocument",
    # Engine
    "Context",
    "GlobalContext",
    "Handler",
    "HandlerRegistry",
    "DEFAULT_HANDLERS",
    "create_node",
    "visit_node",
    "visit_children",
    # Preprocessing
    "lift_nodes",
    "lift_images",
    "lift_assets",
    "invert_link_headings",
    "preprocess_google_docs",
    # Exceptions
    "Html2DastError",
    "ValidationError",
    "InvalidOptionsError",
    "SchemaError",
    "ParsingError",
    "DependencyError",
]
