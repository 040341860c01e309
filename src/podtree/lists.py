#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/podtree/lists.py
"""List normalization for converted trees.

Markup parsers report list entries as free-standing items. After conversion
these passes put every :class:`~podtree.nodes.Item` inside a
:class:`~podtree.nodes.List`, so a renderer can open one list wrapper and
decide how to render an item's contents by checking ``parent`` alone.

"""

from __future__ import annotations

import logging
from typing import Optional

from podtree.nodes import Item, List, Node
from podtree.tree import append_child, capture_position, remove_child, replace_at

logger = logging.getLogger(__name__)


def fixup_root(tree: Node) -> Node:
    """Wrap a root Item in a new List.

    Parameters
    ----------
    tree : Node
        Converted tree root

    Returns
    -------
    Node
        The new List root if ``tree`` is an Item, otherwise ``tree`` itself

    """
    if not isinstance(tree, Item):
        return tree

    wrapper = List()
    append_child(wrapper, tree)
    logger.debug("Wrapped root item in a List")
    return wrapper


def normalize_lists(tree: Node, merge_adjacent: bool = False) -> int:
    """Wrap every Item below ``tree`` in a List container.

    The tree is processed depth-first and each child's subtree is normalized
    before the child itself, so the most deeply nested items are wrapped
    first. Items already directly under a List are left in place.

    Parameters
    ----------
    tree : Node
        Root of the subtree to normalize; modified in place
    merge_adjacent : bool, default False
        If True, a run of adjacent Item siblings shares one List. If False,
        every Item gets a List of its own.

    Returns
    -------
    int
        Number of List nodes created

    """
    created = 0
    open_list: Optional[List] = None

    child = tree.first_child
    while child is not None:
        following = child.next_sibling
        created += normalize_lists(child, merge_adjacent=merge_adjacent)

        if not isinstance(child, Item) or isinstance(tree, List):
            open_list = None
        elif open_list is not None:
            remove_child(child)
            append_child(open_list, child)
        else:
            # The item's position must be taken before it is reparented
            position = capture_position(child)
            wrapper = List()
            append_child(wrapper, child)
            replace_at(position, wrapper)
            created += 1
            if merge_adjacent:
                open_list = wrapper

        child = following

    return created
