"""podtree - navigable document trees from parsed documentation markup.

podtree takes the tree an external documentation-markup parser produces and
turns it into a normalized, doubly-linked document tree. Every node knows its
parent, its siblings and its first and last child, and list entries are
always wrapped in an explicit List container, so renderers can make decisions
by looking at a node's parent.

Examples
--------
Build a tree and walk it:

    >>> from podtree import build_tree, walk
    >>> from podtree.markup import ItemBlock, NamedBlock, Para
    >>> root = build_tree(NamedBlock(name="pod", contents=[
    ...     Para(contents=["Intro"]),
    ...     ItemBlock(level=1, contents=["first"]),
    ... ]))
    >>> [node.kind for node in walk(root)]
    ['Document', 'Paragraph', 'Text', 'List', 'Item', 'Text']

"""

from podtree.api import build_tree
from podtree.converter import MarkupConverter, convert
from podtree.exceptions import PodTreeError, TreeInvariantError, UnrecognizedNodeKindError
from podtree.lists import fixup_root, normalize_lists
from podtree.nodes import (
    NODE_KINDS,
    Bold,
    Code,
    Comment,
    Document,
    Entity,
    Heading,
    Item,
    Link,
    List,
    Node,
    Paragraph,
    Reference,
    Section,
    Table,
    TableBody,
    TableBodyRow,
    TableData,
    TableHeader,
    Text,
)
from podtree.options import BuildOptions
from podtree.tree import (
    Position,
    append_child,
    capture_position,
    check_invariants,
    remove_child,
    replace_at,
    replace_node,
    walk,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "build_tree",
    "convert",
    "MarkupConverter",
    "fixup_root",
    "normalize_lists",
    "BuildOptions",
    # Tree surgery
    "Position",
    "append_child",
    "capture_position",
    "check_invariants",
    "remove_child",
    "replace_at",
    "replace_node",
    "walk",
    # Exceptions
    "PodTreeError",
    "TreeInvariantError",
    "UnrecognizedNodeKindError",
    # Nodes
    "NODE_KINDS",
    "Node",
    "Document",
    "Section",
    "Paragraph",
    "Heading",
    "Item",
    "List",
    "Bold",
    "Code",
    "Comment",
    "Entity",
    "Link",
    "Reference",
    "Text",
    "Table",
    "TableHeader",
    "TableBody",
    "TableBodyRow",
    "TableData",
]
