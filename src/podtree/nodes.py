#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/podtree/nodes.py
"""Node classes for the normalized document tree.

This module defines the single node hierarchy produced by the converter. Each
node carries five navigation fields linking it to its parent, its siblings and
its children, so a renderer can make decisions by looking at ``node.parent``
instead of tracking state while it walks.

Ownership
---------
A node owns the chain of children reachable from ``first_child`` through
``next_sibling``. ``last_child`` is a cached tail pointer, and ``parent`` and
``previous_sibling`` are plain back-references. The navigation fields are
written only by :mod:`podtree.tree`.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Section, Paragraph, Heading, Item, List
    - Table, TableHeader, TableBody, TableBodyRow, TableData

Inline nodes:
    - Bold, Code, Comment, Entity, Link, Reference, Text

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Optional


@dataclass(eq=False, repr=False)
class Node:
    """Base class for all tree nodes.

    Nodes compare by identity. The navigation fields are not constructor
    arguments; a fresh node is always a detached root with no children.

    Attributes
    ----------
    parent : Node or None
        Enclosing node, None for the root
    first_child, last_child : Node or None
        Head and tail of the owned child chain
    previous_sibling, next_sibling : Node or None
        Neighbours within the parent's child chain

    """

    kind: ClassVar[str] = "Node"

    parent: Optional[Node] = field(default=None, init=False)
    first_child: Optional[Node] = field(default=None, init=False)
    last_child: Optional[Node] = field(default=None, init=False)
    previous_sibling: Optional[Node] = field(default=None, init=False)
    next_sibling: Optional[Node] = field(default=None, init=False)

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return self.first_child is None

    @property
    def is_branch(self) -> bool:
        """Whether the node has at least one child."""
        return self.first_child is not None

    @property
    def payload(self) -> Any:
        """Variant-specific payload value, or None for variants without one."""
        return None

    def children(self) -> Iterator[Node]:
        """Iterate over direct children in sibling order.

        Yields
        ------
        Node
            Each child, from ``first_child`` to ``last_child``

        """
        child = self.first_child
        while child is not None:
            # Read ahead so callers may reparent the yielded child
            following = child.next_sibling
            yield child
            child = following

    def __repr__(self) -> str:
        """Return kind and payload without following navigation links."""
        payload = self.payload
        if payload is None:
            return f"{self.kind}()"
        return f"{self.kind}({payload!r})"


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(eq=False, repr=False)
class Document(Node):
    """Whole-document root, converted from a ``pod`` block."""

    kind: ClassVar[str] = "Document"


@dataclass(eq=False, repr=False)
class Section(Node):
    """Named block other than ``pod``.

    Parameters
    ----------
    title : str
        Block name

    """

    kind: ClassVar[str] = "Section"

    title: str = ""

    @property
    def payload(self) -> Any:
        """Return the section title."""
        return self.title


@dataclass(eq=False, repr=False)
class Paragraph(Node):
    """Prose block."""

    kind: ClassVar[str] = "Paragraph"


@dataclass(eq=False, repr=False)
class Heading(Node):
    """Section heading.

    Parameters
    ----------
    level : int
        Heading level as given in the markup; not validated

    """

    kind: ClassVar[str] = "Heading"

    level: int = 1

    @property
    def payload(self) -> Any:
        """Return the heading level."""
        return self.level


@dataclass(eq=False, repr=False)
class Item(Node):
    """One list entry.

    After normalization every Item's parent is a :class:`List`.

    Parameters
    ----------
    level : int
        Nesting level as given in the markup

    """

    kind: ClassVar[str] = "Item"

    level: int = 1

    @property
    def payload(self) -> Any:
        """Return the item level."""
        return self.level


@dataclass(eq=False, repr=False)
class List(Node):
    """List container created by list normalization."""

    kind: ClassVar[str] = "List"


@dataclass(eq=False, repr=False)
class Table(Node):
    """Table container holding an optional header and an optional body."""

    kind: ClassVar[str] = "Table"


@dataclass(eq=False, repr=False)
class TableHeader(Node):
    """Header row of a table; children are :class:`TableData` cells."""

    kind: ClassVar[str] = "Table.Header"


@dataclass(eq=False, repr=False)
class TableBody(Node):
    """Body of a table; children are :class:`TableBodyRow` rows."""

    kind: ClassVar[str] = "Table.Body"


@dataclass(eq=False, repr=False)
class TableBodyRow(Node):
    """One body row; children are :class:`TableData` cells."""

    kind: ClassVar[str] = "Table.Body.Row"


@dataclass(eq=False, repr=False)
class TableData(Node):
    """One table cell wrapping a single converted value."""

    kind: ClassVar[str] = "Table.Data"


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(eq=False, repr=False)
class Bold(Node):
    """Bold span."""

    kind: ClassVar[str] = "Bold"


@dataclass(eq=False, repr=False)
class Code(Node):
    """Code block or inline code span."""

    kind: ClassVar[str] = "Code"


@dataclass(eq=False, repr=False)
class Comment(Node):
    """Comment block."""

    kind: ClassVar[str] = "Comment"


@dataclass(eq=False, repr=False)
class Entity(Node):
    """Literal character-entity text.

    Parameters
    ----------
    contents : any
        Entity contents copied verbatim from the markup

    """

    kind: ClassVar[str] = "Entity"

    contents: Any = None

    @property
    def payload(self) -> Any:
        """Return the entity contents."""
        return self.contents


@dataclass(eq=False, repr=False)
class Link(Node):
    """Hyperlink span.

    Parameters
    ----------
    url : str
        Link target

    """

    kind: ClassVar[str] = "Link"

    url: str = ""

    @property
    def payload(self) -> Any:
        """Return the link target."""
        return self.url


@dataclass(eq=False, repr=False)
class Reference(Node):
    """Cross-reference span."""

    kind: ClassVar[str] = "Reference"


@dataclass(eq=False, repr=False)
class Text(Node):
    """Leaf text run.

    Parameters
    ----------
    value : str
        The text, verbatim

    """

    kind: ClassVar[str] = "Text"

    value: str = ""

    @property
    def payload(self) -> Any:
        """Return the text value."""
        return self.value


NODE_KINDS: dict[str, type[Node]] = {
    cls.kind: cls
    for cls in (
        Document,
        Section,
        Paragraph,
        Heading,
        Item,
        List,
        Table,
        TableHeader,
        TableBody,
        TableBodyRow,
        TableData,
        Bold,
        Code,
        Comment,
        Entity,
        Link,
        Reference,
        Text,
    )
}
