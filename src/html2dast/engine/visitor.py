#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/engine/visitor.py
"""Dispatch of input nodes to handlers.

:func:`visit_node` picks the handler for one input node and resolves its
result; :func:`visit_children` does the same for every child of a node and
concatenates the results in document order. Handlers may be plain functions
or coroutine functions, and may return lists that mix nodes and awaitables.

"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterator, Mapping, Optional

from html2dast.dast.nodes import Node
from html2dast.engine.context import Context, CreateNode, Handler, HandlerResult
from html2dast.exceptions import ValidationError
from html2dast.hast.nodes import Element, HastNode, HastParent, Root, Text

logger = logging.getLogger(__name__)

REQUIRED_HANDLERS = ("root", "text")


class HandlerRegistry(Mapping[str, Handler]):
    """Handler lookup table with user overrides merged over the defaults.

    Parameters
    ----------
    defaults : Mapping[str, Handler]
        Built-in handlers keyed by tag name, plus ``"root"`` and ``"text"``
    overrides : Mapping[str, Handler], optional
        Caller-supplied handlers; these take precedence over the defaults

    Raises
    ------
    ValidationError
        If the merged table lacks a ``root`` or ``text`` handler, or any
        entry is not callable

    """

    def __init__(self, defaults: Mapping[str, Handler], overrides: Optional[Mapping[str, Handler]] = None):
        """Merge and validate the handler tables."""
        merged: dict[str, Handler] = dict(defaults)
        merged.update(overrides or {})

        for name in REQUIRED_HANDLERS:
            if name not in merged:
                raise ValidationError(f"Handler table must define a '{name}' handler", parameter_name="handlers")
        for name, handler in merged.items():
            if not callable(handler):
                raise ValidationError(
                    f"Handler for '{name}' is not callable", parameter_name="handlers", parameter_value=handler
                )

        self._handlers = merged
        self.defaults: Mapping[str, Handler] = dict(defaults)
        self.overridden = frozenset(overrides or ())

    def __getitem__(self, key: str) -> Handler:
        """Return the handler registered for ``key``."""
        return self._handlers[key]

    def __iter__(self) -> Iterator[str]:
        """Iterate over registered names."""
        return iter(self._handlers)

    def __len__(self) -> int:
        """Return the number of registered handlers."""
        return len(self._handlers)

    def __repr__(self) -> str:
        """Return a summary listing the overridden handlers."""
        return f"HandlerRegistry({len(self)} handlers, overridden={sorted(self.overridden)})"


async def resolve(result: Any) -> Any:
    """Await ``result`` and any awaitables inside it.

    Lists are resolved element by element in index order and flattened, with
    None entries dropped. A single node or None is returned as is.
    """
    while inspect.isawaitable(result):
        result = await result

    if isinstance(result, (list, tuple)):
        flat: list[Node] = []
        for item in result:
            resolved = await resolve(item)
            if resolved is None:
                continue
            if isinstance(resolved, list):
                flat.extend(resolved)
            else:
                flat.append(resolved)
        return flat

    return result


async def unknown_handler(create_node: CreateNode, node: HastNode, context: Context) -> list[Node]:
    """Fallback for elements without a handler: convert their children."""
    if isinstance(node, Text):
        return []
    return await visit_children(create_node, node, context)


def select_handler(node: HastNode, context: Context) -> Handler:
    """Return the handler responsible for ``node``."""
    if isinstance(node, Text):
        return context.handlers["text"]
    if isinstance(node, Root):
        return context.handlers["root"]
    if isinstance(node, Element):
        handler = context.handlers.get(node.tag_name)
        if handler is None:
            logger.debug(f"No handler for <{node.tag_name}>, converting its children")
            return unknown_handler
        return handler
    raise TypeError(f"Not an input node: {type(node).__name__}")


async def visit_node(create_node: CreateNode, node: HastNode, context: Context) -> HandlerResult:
    """Convert a single input node.

    Parameters
    ----------
    create_node : CreateNode
        Output node factory passed to the handler
    node : HastNode
        The node to convert
    context : Context
        Current traversal context

    Returns
    -------
    Node, list of Node, or None
        The handler's result with every awaitable resolved

    """
    handler = select_handler(node, context)
    return await resolve(handler(create_node, node, context))


async def visit_children(create_node: CreateNode, parent: HastParent, context: Context) -> list[Node]:
    """Convert every child of ``parent`` and concatenate the results.

    Children are visited one at a time in document order with
    ``parent_node`` set to ``parent``.

    Parameters
    ----------
    create_node : CreateNode
        Output node factory passed to the handlers
    parent : HastParent
        Node whose children are converted
    context : Context
        Context of the parent; only ``parent_node`` is replaced

    Returns
    -------
    list of Node
        Flattened results, None values dropped

    """
    child_context = context.derive(parent_node=parent)
    values: list[Node] = []
    for child in list(parent.children):
        result = await visit_node(create_node, child, child_context)
        if result is None:
            continue
        if isinstance(result, list):
            values.extend(result)
        else:
            values.append(result)
    return values


__all__ = [
    "HandlerRegistry",
    "REQUIRED_HANDLERS",
    "resolve",
    "select_handler",
    "unknown_handler",
    "visit_children",
    "visit_node",
]
