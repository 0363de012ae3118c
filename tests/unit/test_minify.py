#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_minify.py
"""Unit tests for whitespace minification of input trees."""

import pytest

from html2dast.hast.minify import minify_whitespace
from html2dast.hast.nodes import Root, Text, h


def _texts(node) -> list[str]:
    if isinstance(node, Text):
        return [node.value]
    return [value for child in node.children for value in _texts(child)]


@pytest.mark.unit
class TestMinifyWhitespace:
    """Tests for collapsing insignificant whitespace."""

    def test_indentation_between_blocks_is_removed(self) -> None:
        """Test whitespace-only text between blocks disappears."""
        tree = Root(children=[Text("\n  "), h("p", None, "a"), Text("\n  "), h("p", None, "b"), Text("\n")])
        minify_whitespace(tree)
        assert [child.tag_name for child in tree.children] == ["p", "p"]

    def test_runs_collapse_to_single_space(self) -> None:
        """Test internal whitespace runs collapse and block edges are trimmed."""
        tree = Root(children=[h("p", None, "  hello \n\t  world  ")])
        minify_whitespace(tree)
        assert _texts(tree) == ["hello world"]

    def test_space_across_inline_boundary(self) -> None:
        """Test only one space survives across an inline element boundary."""
        tree = Root(children=[h("p", None, "hello ", h("strong", None, " world"), " !")])
        minify_whitespace(tree)
        assert _texts(tree) == ["hello ", "world", " !"]

    def test_line_break_trims_surrounding_space(self) -> None:
        """Test whitespace around br is dropped."""
        tree = Root(children=[Text("hello "), h("br"), Text("\n   world")])
        minify_whitespace(tree)
        assert _texts(tree) == ["hello", "world"]

    def test_preformatted_untouched(self) -> None:
        """Test whitespace inside pre is preserved."""
        tree = Root(children=[h("pre", None, "  a\n    b\n")])
        minify_whitespace(tree)
        assert _texts(tree) == ["  a\n    b\n"]

    def test_newlines_option(self) -> None:
        """Test runs containing a newline collapse to a newline when requested."""
        tree = Root(children=[h("p", None, "a  \n  b   c")])
        minify_whitespace(tree, newlines=True)
        assert _texts(tree) == ["a\nb c"]
