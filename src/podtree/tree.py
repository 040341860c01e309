#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/podtree/tree.py
"""Tree surgery primitives and traversal helpers.

Every structural edit in podtree goes through this module: the converter
builds trees with :func:`append_child`, and list normalization rewires them
with :func:`replace_node` / :func:`replace_at` and :func:`remove_child`.
Keeping all writes to the navigation fields here is what lets the five tree
invariants hold after every mutation:

1. ``first_child`` is None iff ``last_child`` is None.
2. Walking ``next_sibling`` from ``first_child`` terminates at ``last_child``.
3. Every child reached that way has ``parent`` set to the owning node.
4. Adjacent siblings link to each other in both directions.
5. Only the root has no ``parent``.

:func:`check_invariants` verifies them for a whole tree.

"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from podtree.exceptions import TreeInvariantError
from podtree.nodes import Node


class Position(NamedTuple):
    """Snapshot of where a node sits in its parent's child chain."""

    parent: Optional[Node]
    previous_sibling: Optional[Node]
    next_sibling: Optional[Node]


def append_child(parent: Node, child: Optional[Node]) -> None:
    """Append ``child`` as the new last child of ``parent``.

    The child's own subtree is left untouched. Passing None is a no-op.

    Parameters
    ----------
    parent : Node
        Node receiving the child
    child : Node or None
        Node to append

    """
    if child is None:
        return

    child.parent = parent
    child.next_sibling = None

    tail = parent.last_child
    if tail is not None:
        tail.next_sibling = child
        child.previous_sibling = tail
        parent.last_child = child
    else:
        child.previous_sibling = None
        parent.first_child = child
        parent.last_child = child


def capture_position(node: Node) -> Position:
    """Record the parent and siblings of ``node``.

    Capture the position before any edit that moves ``node``; once it has
    been appended elsewhere its own pointers describe the new location.

    Parameters
    ----------
    node : Node
        Node whose position to record

    Returns
    -------
    Position
        The node's current parent, previous and next sibling

    """
    return Position(node.parent, node.previous_sibling, node.next_sibling)


def replace_at(position: Position, new: Node) -> None:
    """Splice ``new`` into a previously captured position.

    Neighbours and the parent's head/tail pointers are redirected to ``new``.
    The children of ``new`` are not touched.

    Parameters
    ----------
    position : Position
        Position captured from the node being replaced
    new : Node
        Node to put in that position

    """
    parent, previous, following = position

    new.parent = parent
    new.previous_sibling = previous
    new.next_sibling = following

    if previous is not None:
        previous.next_sibling = new
    elif parent is not None:
        parent.first_child = new

    if following is not None:
        following.previous_sibling = new
    elif parent is not None:
        parent.last_child = new


def replace_node(old: Node, new: Node) -> None:
    """Put ``new`` into the exact position currently held by ``old``.

    The position of ``old`` is read before anything is written. If ``old``
    is still linked at that position afterwards it is detached, so it no
    longer points into a chain that does not contain it. Replacing a node
    with itself is a no-op.

    ``old`` must not have been moved under ``new`` already: its pointers
    would then describe a position inside ``new``. Capture the position
    first and use :func:`replace_at` instead.

    Parameters
    ----------
    old : Node
        Node currently in the tree
    new : Node
        Replacement; must already own whatever subtree it should carry

    Raises
    ------
    ValueError
        If ``new`` is ``old``'s parent or one of its ancestors

    """
    if old is new:
        return

    position = capture_position(old)
    ancestor = position.parent
    while ancestor is not None:
        if ancestor is new:
            raise ValueError(f"Cannot replace {old!r} with its own ancestor {new!r}")
        ancestor = ancestor.parent

    replace_at(position, new)

    if old.parent is position.parent:
        old.parent = None
        old.previous_sibling = None
        old.next_sibling = None


def remove_child(node: Node) -> None:
    """Unlink ``node`` from its parent, leaving it a detached root.

    Its subtree comes along unchanged. Removing a root is a no-op.

    Parameters
    ----------
    node : Node
        Node to unlink

    """
    parent = node.parent
    if parent is None:
        return

    previous, following = node.previous_sibling, node.next_sibling
    if previous is not None:
        previous.next_sibling = following
    else:
        parent.first_child = following
    if following is not None:
        following.previous_sibling = previous
    else:
        parent.last_child = previous

    node.parent = None
    node.previous_sibling = None
    node.next_sibling = None


def walk(node: Node) -> Iterator[Node]:
    """Iterate over a subtree depth-first, parents before children.

    Walking never mutates the tree.

    Parameters
    ----------
    node : Node
        Root of the subtree

    Yields
    ------
    Node
        Every node in the subtree, ``node`` first

    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.children())))


def check_invariants(root: Node) -> None:
    """Verify the navigation invariants for every node under ``root``.

    Parameters
    ----------
    root : Node
        Tree root; must not have a parent

    Raises
    ------
    TreeInvariantError
        Naming the first violated invariant and the node where it was found

    """
    if root.parent is not None:
        raise TreeInvariantError(f"Root {root!r} has a parent {root.parent!r}", invariant=5, node=root)

    seen: set[int] = {id(root)}
    stack = [root]
    while stack:
        node = stack.pop()

        if (node.first_child is None) != (node.last_child is None):
            raise TreeInvariantError(
                f"{node!r} has only one of first_child/last_child set", invariant=1, node=node
            )

        previous: Optional[Node] = None
        child = node.first_child
        while child is not None:
            if id(child) in seen:
                raise TreeInvariantError(f"{child!r} is reachable twice under {node!r}", invariant=2, node=child)
            seen.add(id(child))

            if child.parent is not node:
                raise TreeInvariantError(
                    f"{child!r} is a child of {node!r} but its parent is {child.parent!r}", invariant=3, node=child
                )
            if child.previous_sibling is not previous:
                raise TreeInvariantError(
                    f"{child!r} previous_sibling is {child.previous_sibling!r}, expected {previous!r}",
                    invariant=4,
                    node=child,
                )

            stack.append(child)
            previous = child
            child = child.next_sibling

        if previous is not node.last_child:
            raise TreeInvariantError(
                f"Child chain of {node!r} ends at {previous!r}, last_child is {node.last_child!r}",
                invariant=2,
                node=node,
            )
