#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_soup.py
"""Unit tests for the BeautifulSoup adapter."""

import pytest

from html2dast.exceptions import DependencyError, ValidationError
from html2dast.hast.nodes import Element, Root, Text, find, to_text
from html2dast.hast.soup import parse_html, soup_to_hast

bs4 = pytest.importorskip("bs4")


@pytest.mark.unit
class TestParseHtml:
    """Tests for parse_html."""

    def test_fragment(self) -> None:
        """Test a fragment becomes root children in order."""
        tree = parse_html("<p>one</p><p>two</p>")
        assert isinstance(tree, Root)
        assert [child.tag_name for child in tree.children] == ["p", "p"]
        assert to_text(tree) == "onetwo"

    def test_empty_string(self) -> None:
        """Test empty input gives an empty root."""
        assert parse_html("").children == []

    def test_class_becomes_class_name_list(self) -> None:
        """Test class attributes are stored under className."""
        tree = parse_html('<pre><code class="language-js extra">x</code></pre>')
        code = find(tree, "code")
        assert code.properties == {"className": ["language-js", "extra"]}

    def test_multi_valued_attributes_joined(self) -> None:
        """Test other multi-valued attributes become strings."""
        tree = parse_html('<a href="/x" rel="noopener noreferrer">x</a>')
        anchor = find(tree, "a")
        assert anchor.properties == {"href": "/x", "rel": "noopener noreferrer"}

    def test_comments_and_doctype_skipped(self) -> None:
        """Test comments and the doctype do not appear in the tree."""
        tree = parse_html("<!doctype html><!-- note --><p>x</p>")
        assert len(tree.children) == 1
        assert tree.children[0].tag_name == "p"

    def test_entities_decoded(self) -> None:
        """Test character references are decoded in text."""
        tree = parse_html("<p>&lt;Image /&gt; &amp; more</p>")
        assert to_text(tree) == "<Image /> & more"

    def test_tag_names_lowercase(self) -> None:
        """Test tag names are normalized."""
        tree = parse_html("<P><STRONG>x</STRONG></P>")
        assert tree.children[0].tag_name == "p"
        assert tree.children[0].children[0].tag_name == "strong"

    def test_unsupported_parser(self) -> None:
        """Test unknown parser names are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            parse_html("<p>x</p>", parser="regex")
        assert exc_info.value.parameter_name == "html_parser"

    def test_parser_not_installed(self, monkeypatch) -> None:
        """Test a missing tree builder is reported as a dependency problem."""

        def unavailable(markup, features):
            raise bs4.FeatureNotFound(f"Couldn't find a tree builder with the features you requested: {features}")

        monkeypatch.setattr(bs4, "BeautifulSoup", unavailable)
        with pytest.raises(DependencyError) as exc_info:
            parse_html("<p>x</p>", parser="lxml")
        assert exc_info.value.missing_packages == [("lxml", "")]
        assert "lxml" in exc_info.value.message


@pytest.mark.unit
class TestSoupToHast:
    """Tests for converting an existing soup."""

    def test_from_soup(self) -> None:
        """Test a caller-parsed soup converts to the same shape."""
        soup = bs4.BeautifulSoup("<ul><li>a</li><li>b</li></ul>", "html.parser")
        tree = soup_to_hast(soup)
        ul = tree.children[0]
        assert isinstance(ul, Element)
        assert [li.tag_name for li in ul.children] == ["li", "li"]
        assert ul.children[1].children == [Text("b")]
