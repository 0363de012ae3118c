#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_hast_nodes.py
"""Unit tests for the input tree model.

Tests cover:
- Building trees with h()
- Loading and dumping JSON-like hast mappings
- Text extraction and tree walking

"""

import pytest

from html2dast.exceptions import ParsingError
from html2dast.hast.nodes import Element, Root, Text, class_names, find, from_dict, h, to_dict, to_text, walk


@pytest.mark.unit
class TestBuilders:
    """Tests for tree construction helpers."""

    def test_h_turns_strings_into_text(self) -> None:
        """Test string children become Text nodes."""
        node = h("p", {"class": "x"}, "a", h("em", None, "b"))
        assert node.tag_name == "p"
        assert node.properties == {"class": "x"}
        assert node.children[0] == Text("a")
        assert isinstance(node.children[1], Element)

    def test_class_names_accepts_string_or_list(self) -> None:
        """Test className may be a list or a space separated string."""
        assert class_names(h("code", {"className": ["language-js", "x"]})) == ["language-js", "x"]
        assert class_names(h("code", {"className": "language-js x"})) == ["language-js", "x"]
        assert class_names(h("code")) == []


@pytest.mark.unit
class TestFromDict:
    """Tests for loading hast mappings."""

    def test_round_trip_shape(self) -> None:
        """Test a serialized tree loads into the matching nodes."""
        data = {
            "type": "root",
            "children": [
                {
                    "type": "element",
                    "tagName": "P",
                    "properties": {"id": "a"},
                    "children": [{"type": "text", "value": "hello"}],
                }
            ],
        }
        tree = from_dict(data)
        assert tree == Root(children=[Element(tag_name="p", properties={"id": "a"}, children=[Text("hello")])])
        assert to_dict(tree)["children"][0]["tagName"] == "p"

    def test_skips_comments_and_doctype(self) -> None:
        """Test comment and doctype nodes are dropped."""
        tree = from_dict(
            {
                "type": "root",
                "children": [{"type": "doctype"}, {"type": "comment", "value": "x"}, {"type": "text", "value": "y"}],
            }
        )
        assert tree.children == [Text("y")]

    def test_rejects_unknown_type(self) -> None:
        """Test unsupported node types raise ParsingError."""
        with pytest.raises(ParsingError):
            from_dict({"type": "instruction"})

    def test_rejects_element_without_tag(self) -> None:
        """Test elements need a tag name."""
        with pytest.raises(ParsingError):
            from_dict({"type": "element", "children": []})

    def test_rejects_non_mapping(self) -> None:
        """Test non-mapping input raises ParsingError."""
        with pytest.raises(ParsingError):
            from_dict(["root"])  # type: ignore[arg-type]


@pytest.mark.unit
class TestTraversal:
    """Tests for text extraction and walking."""

    def test_to_text_with_line_breaks(self) -> None:
        """Test br elements contribute newlines."""
        node = h("pre", None, h("code", None, "a", h("br"), "b\n"))
        assert to_text(node) == "a\nb\n"

    def test_walk_is_pre_order(self) -> None:
        """Test walk yields parents before children."""
        tree = Root(children=[h("div", None, h("p", None, "x")), h("hr")])
        kinds = [node.tag_name if isinstance(node, Element) else node.type for node in walk(tree)]
        assert kinds == ["root", "div", "p", "text", "hr"]

    def test_find(self) -> None:
        """Test find returns the first matching element."""
        tree = Root(children=[h("html", None, h("body", None, h("p")))])
        assert find(tree, "body").tag_name == "body"
        assert find(tree, "table") is None
