#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_wrap.py
"""Unit tests for paragraph wrapping of inline runs."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from html2dast.dast.nodes import Block, Code, InlineItem, Link, ListItem, Paragraph, Span, ThematicBreak, create_node
from html2dast.dast.schema import is_inline
from html2dast.engine.context import Context
from html2dast.engine.handlers import DEFAULT_HANDLERS
from html2dast.engine.visitor import HandlerRegistry
from html2dast.engine.wrap import wrap, wrap_list_items
from html2dast.hast.nodes import h

inline_nodes = st.one_of(
    st.builds(Span, value=st.text(max_size=5)),
    st.builds(Link, url=st.just("/x"), children=st.just([])),
    st.builds(InlineItem, item=st.just("1")),
)
block_nodes = st.one_of(
    st.builds(Code, code=st.text(max_size=5)),
    st.builds(ThematicBreak),
    st.builds(Block, item=st.just("1")),
)
node_sequences = st.lists(st.one_of(inline_nodes, block_nodes), max_size=12)


@pytest.mark.unit
class TestWrap:
    """Tests for wrap()."""

    def test_runs_become_paragraphs(self) -> None:
        """Test each run of inline nodes becomes one paragraph."""
        nodes = [Span("a"), Link(url="/x", children=[Span("b")]), ThematicBreak(), Span("c")]
        assert wrap(nodes) == [
            Paragraph(children=[Span("a"), Link(url="/x", children=[Span("b")])]),
            ThematicBreak(),
            Paragraph(children=[Span("c")]),
        ]

    def test_blocks_only(self) -> None:
        """Test a sequence without inline nodes is unchanged."""
        nodes = [Code(code="x"), ThematicBreak()]
        assert wrap(nodes) == nodes

    def test_empty(self) -> None:
        """Test an empty sequence gives no paragraph."""
        assert wrap([]) == []

    def test_whitespace_is_still_wrapped(self) -> None:
        """Test whitespace-only spans are wrapped rather than dropped."""
        assert wrap([Span(" ")]) == [Paragraph(children=[Span(" ")])]
        assert wrap([Span("")]) == [Paragraph(children=[Span("")])]

    @given(node_sequences)
    def test_idempotent(self, nodes) -> None:
        """Test wrapping twice equals wrapping once."""
        once = wrap(nodes)
        assert wrap(once) == once

    @given(node_sequences)
    def test_no_inline_left_and_order_kept(self, nodes) -> None:
        """Test the result has no top-level inline node and keeps every node in order."""
        result = wrap(nodes)
        assert not any(is_inline(node.type) for node in result)

        flattened = []
        for node in result:
            flattened.extend(node.children if isinstance(node, Paragraph) else [node])
        assert flattened == nodes

    @given(node_sequences)
    def test_no_adjacent_synthetic_paragraphs(self, nodes) -> None:
        """Test runs are maximal, so two wrapped paragraphs are never adjacent."""
        result = wrap(nodes)
        for left, right in zip(result, result[1:]):
            assert not (isinstance(left, Paragraph) and isinstance(right, Paragraph))


@pytest.mark.unit
class TestWrapListItems:
    """Tests for wrap_list_items()."""

    @pytest.mark.asyncio
    async def test_items_and_strays(self) -> None:
        """Test stray children are wrapped in list items."""

        def text(create_node, node, context):
            return create_node("span", value=node.value)

        def nested(create_node, node, context):
            return create_node("list", style="bulleted", children=[])

        registry = HandlerRegistry(DEFAULT_HANDLERS, {"text": text, "nested": nested})
        context = Context(parent_node_type="list", handlers=registry, default_handlers=registry.defaults)
        items = await wrap_list_items(create_node, h("ul", None, h("li", None, "a"), "b", h("nested")), context)

        assert all(isinstance(item, ListItem) for item in items)
        assert items[1] == ListItem(children=[Paragraph(children=[Span("b")])])
        assert items[2].children[0].type == "list"
