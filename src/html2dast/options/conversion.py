#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2dast/options/conversion.py
"""Configuration options for HTML to structured-text conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from html2dast.constants import (
    BLOCK_TYPES,
    DEFAULT_ALLOWED_BLOCKS,
    DEFAULT_ALLOWED_MARKS,
    DEFAULT_CODE_PREFIX,
    DEFAULT_HTML_PARSER,
    DEFAULT_MINIFY_WHITESPACE,
    DEFAULT_NEWLINES,
    HTML_PARSERS,
    MARKS,
    HtmlParser,
)
from html2dast.engine.context import Handler
from html2dast.exceptions import ValidationError
from html2dast.hast.nodes import Root
from html2dast.options.base import CloneFrozenMixin

Preprocessor = Callable[[Root], Any]


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration options for a conversion.

    Parameters
    ----------
    allowed_blocks : tuple of str, default all block types
        Block types the output may contain: any of ``blockquote``, ``code``,
        ``heading``, ``link`` and ``list``. Disabled blocks are replaced by
        their content.
    allowed_marks : tuple of str, default all marks
        Marks spans may carry: any of ``strong``, ``code``, ``emphasis``,
        ``underline``, ``strikethrough`` and ``highlight``.
    handlers : Mapping[str, Handler], default empty
        Handlers keyed by tag name (or ``"root"``/``"text"``) that replace the
        built-in ones.
    code_prefix : str, default "language-"
        Class-name prefix marking a code block's language.
    shared : Mapping[str, Any], default empty
        Initial values for the shared global context (``base_url``,
        ``base_url_found``).
    preprocess : callable, optional
        Called with the input tree after whitespace minification and before
        conversion; may rewrite the tree in place.
    newlines : bool, default False
        Keep a line break when collapsing a whitespace run that contains one.
    minify_whitespace : bool, default True
        Collapse insignificant whitespace before conversion.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup parser used by ``html_to_structured_text``.

    """

    allowed_blocks: tuple[str, ...] = field(
        default=DEFAULT_ALLOWED_BLOCKS,
        metadata={"help": "Block types the output may contain", "choices": list(BLOCK_TYPES), "importance": "core"},
    )
    allowed_marks: tuple[str, ...] = field(
        default=DEFAULT_ALLOWED_MARKS,
        metadata={"help": "Marks that spans may carry", "choices": list(MARKS), "importance": "core"},
    )
    handlers: Mapping[str, Handler] = field(
        default_factory=dict,
        metadata={"help": "Handlers that replace the built-in ones, keyed by tag name", "importance": "advanced"},
    )
    code_prefix: str = field(
        default=DEFAULT_CODE_PREFIX,
        metadata={"help": "Class-name prefix identifying a code block's language", "importance": "advanced"},
    )
    shared: Mapping[str, Any] = field(
        default_factory=dict,
        metadata={"help": "Initial values for the shared global context", "importance": "advanced"},
    )
    preprocess: Optional[Preprocessor] = field(
        default=None,
        metadata={"help": "Callable that rewrites the input tree before conversion", "importance": "advanced"},
    )
    newlines: bool = field(
        default=DEFAULT_NEWLINES,
        metadata={"help": "Keep line breaks when collapsing whitespace", "importance": "core"},
    )
    minify_whitespace: bool = field(
        default=DEFAULT_MINIFY_WHITESPACE,
        metadata={"help": "Collapse insignificant whitespace before conversion", "importance": "advanced"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (matches browser behavior, slower), 'lxml' (fast, requires C library)"
            ),
            "choices": list(HTML_PARSERS),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Normalize sequences and validate names.

        Raises
        ------
        ValidationError
            If a block, mark or parser name is unknown, ``code_prefix`` is not a
            string, or a handler or the preprocess hook is not callable.

        """
        object.__setattr__(self, "allowed_blocks", tuple(self.allowed_blocks))
        object.__setattr__(self, "allowed_marks", tuple(self.allowed_marks))

        unknown_blocks = [name for name in self.allowed_blocks if name not in BLOCK_TYPES]
        if unknown_blocks:
            raise ValidationError(
                f"Unknown block type(s) in allowed_blocks: {', '.join(map(repr, unknown_blocks))}",
                parameter_name="allowed_blocks",
                parameter_value=self.allowed_blocks,
            )

        unknown_marks = [name for name in self.allowed_marks if name not in MARKS]
        if unknown_marks:
            raise ValidationError(
                f"Unknown mark(s) in allowed_marks: {', '.join(map(repr, unknown_marks))}",
                parameter_name="allowed_marks",
                parameter_value=self.allowed_marks,
            )

        for name, handler in self.handlers.items():
            if not callable(handler):
                raise ValidationError(
                    f"Handler for '{name}' must be callable, got {type(handler).__name__}",
                    parameter_name="handlers",
                    parameter_value=handler,
                )

        if not isinstance(self.code_prefix, str):
            raise ValidationError(
                f"code_prefix must be a string, got {type(self.code_prefix).__name__}",
                parameter_name="code_prefix",
                parameter_value=self.code_prefix,
            )

        if self.preprocess is not None and not callable(self.preprocess):
            raise ValidationError(
                "preprocess must be callable", parameter_name="preprocess", parameter_value=self.preprocess
            )

        if self.html_parser not in HTML_PARSERS:
            raise ValidationError(
                f"Unsupported HTML parser: {self.html_parser!r}. Choose one of {', '.join(HTML_PARSERS)}",
                parameter_name="html_parser",
                parameter_value=self.html_parser,
            )


__all__ = ["ConversionOptions", "Preprocessor"]
