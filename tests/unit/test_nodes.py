#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_nodes.py
"""Unit tests for document tree node classes.

Tests cover:
- Node creation and default navigation state
- Leaf/branch predicates and child iteration
- Payloads and kind tags

"""

import pytest

from podtree import (
    NODE_KINDS,
    Document,
    Entity,
    Heading,
    Item,
    Link,
    List,
    Paragraph,
    Section,
    TableBodyRow,
    Text,
    append_child,
)


@pytest.mark.unit
class TestNodeCreation:
    """Tests for creating nodes."""

    def test_fresh_node_is_detached(self):
        """Test that a new node has no navigation links."""
        node = Paragraph()
        assert node.parent is None
        assert node.first_child is None
        assert node.last_child is None
        assert node.previous_sibling is None
        assert node.next_sibling is None

    def test_navigation_fields_are_not_constructor_arguments(self):
        """Test that navigation links cannot be passed at construction."""
        with pytest.raises(TypeError):
            Paragraph(parent=Document())  # type: ignore[call-arg]

    def test_nodes_compare_by_identity(self):
        """Test that structurally equal nodes are distinct."""
        assert Text(value="a") != Text(value="a")
        text = Text(value="a")
        assert text == text


@pytest.mark.unit
class TestNodePredicates:
    """Tests for is_leaf, is_branch and children()."""

    def test_leaf_without_children(self):
        """Test a node without children is a leaf."""
        text = Text(value="hello")
        assert text.is_leaf
        assert not text.is_branch
        assert list(text.children()) == []

    def test_branch_with_children(self):
        """Test a node with children is a branch and yields them in order."""
        para = Paragraph()
        first, second = Text(value="a"), Text(value="b")
        append_child(para, first)
        append_child(para, second)

        assert para.is_branch
        assert not para.is_leaf
        assert list(para.children()) == [first, second]

    def test_children_tolerates_reparenting_during_iteration(self):
        """Test that moving the yielded child does not cut iteration short."""
        source = Paragraph()
        target = List()
        nodes = [Text(value=str(i)) for i in range(3)]
        for node in nodes:
            append_child(source, node)

        moved = []
        for child in source.children():
            append_child(target, child)
            moved.append(child)

        assert moved == nodes
        assert list(target.children()) == nodes


@pytest.mark.unit
class TestNodePayloads:
    """Tests for kind tags and payloads."""

    @pytest.mark.parametrize(
        "node,payload",
        [
            (Section(title="SYNOPSIS"), "SYNOPSIS"),
            (Heading(level=2), 2),
            (Item(level=3), 3),
            (Entity(contents=["amp"]), ["amp"]),
            (Link(url="https://example.com"), "https://example.com"),
            (Text(value="hi"), "hi"),
            (Paragraph(), None),
            (Document(), None),
        ],
    )
    def test_payload(self, node, payload):
        """Test the payload property of each variant."""
        assert node.payload == payload

    def test_kind_tags(self):
        """Test dotted kind tags on table parts."""
        assert TableBodyRow.kind == "Table.Body.Row"
        assert NODE_KINDS["Table.Body.Row"] is TableBodyRow
        assert NODE_KINDS["List"] is List
        assert len(NODE_KINDS) == 18

    def test_repr_does_not_follow_links(self):
        """Test repr shows kind and payload only."""
        para = Paragraph()
        append_child(para, Text(value="x"))
        assert repr(para) == "Paragraph()"
        assert repr(para.first_child) == "Text('x')"
        assert repr(Heading(level=1)) == "Heading(1)"
