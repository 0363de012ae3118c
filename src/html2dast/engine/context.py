#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/engine/context.py
"""Traversal context threaded through every handler call.

A :class:`Context` is immutable: handlers derive a new one for the subtree
they recurse into with :meth:`Context.derive`. The only state shared across
the whole traversal is the :class:`GlobalContext`, which records the base URL
discovered in the document's ``<base>`` element.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Optional, Union

from html2dast.constants import DEFAULT_ALLOWED_BLOCKS, DEFAULT_ALLOWED_MARKS, DEFAULT_CODE_PREFIX

if TYPE_CHECKING:
    from html2dast.dast.nodes import Node
    from html2dast.hast.nodes import HastNode, HastParent

CreateNode = Callable[..., "Node"]
HandlerResult = Union["Node", list[Any], None, Awaitable[Any]]
Handler = Callable[[CreateNode, "HastNode", "Context"], HandlerResult]


@dataclass
class GlobalContext:
    """State shared by every handler during one conversion.

    Parameters
    ----------
    base_url : str or None, default = None
        Base URL used to resolve relative link targets
    base_url_found : bool, default = False
        Set once a ``<base>`` element was seen; later ones are ignored

    """

    base_url: Optional[str] = None
    base_url_found: bool = False


@dataclass(frozen=True)
class Context:
    """Per-call traversal state.

    Parameters
    ----------
    parent_node_type : str
        Output node type the current node would be inserted into
    parent_node : HastParent or None
        Input node whose children are being visited
    handlers : Mapping[str, Handler]
        Handler registry, user overrides merged over the defaults
    default_handlers : Mapping[str, Handler]
        Built-in handlers, for overrides that delegate to the default behavior
    wrap_text : bool, default = True
        When False, newlines in text are replaced with spaces
    marks : tuple of str, default = ()
        Marks accumulated from enclosing formatting elements
    allowed_blocks : tuple of str
        Block types the conversion may produce
    allowed_marks : tuple of str
        Marks the conversion may produce
    code_prefix : str, default = "language-"
        Class-name prefix that identifies a code block's language
    global_context : GlobalContext
        Shared mutable state

    """

    parent_node_type: str = "root"
    parent_node: Optional[HastParent] = None
    handlers: Mapping[str, Handler] = field(default_factory=dict)
    default_handlers: Mapping[str, Handler] = field(default_factory=dict)
    wrap_text: bool = True
    marks: tuple[str, ...] = ()
    allowed_blocks: tuple[str, ...] = DEFAULT_ALLOWED_BLOCKS
    allowed_marks: tuple[str, ...] = DEFAULT_ALLOWED_MARKS
    code_prefix: str = DEFAULT_CODE_PREFIX
    global_context: GlobalContext = field(default_factory=GlobalContext)

    def derive(self, **overrides: Any) -> Context:
        """Return a copy of this context with ``overrides`` applied.

        The global context is shared with the copy, not duplicated.
        """
        return replace(self, **overrides)

    def with_mark(self, mark: str) -> Context:
        """Return a context with ``mark`` appended, unless already present."""
        if mark in self.marks:
            return self
        return self.derive(marks=self.marks + (mark,))

    @property
    def active_marks(self) -> list[str]:
        """Accumulated marks that are enabled by ``allowed_marks``."""
        return [mark for mark in self.marks if mark in self.allowed_marks]


__all__ = ["Context", "GlobalContext", "Handler", "HandlerResult", "CreateNode"]
