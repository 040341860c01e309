#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/podtree/api.py
"""Public entry point for building normalized document trees."""

from __future__ import annotations

import logging
from typing import Any, Optional

from podtree.converter import MarkupConverter
from podtree.lists import fixup_root, normalize_lists
from podtree.nodes import Node
from podtree.options import BuildOptions
from podtree.tree import check_invariants
from podtree.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def build_tree(source: Any, options: Optional[BuildOptions] = None, **kwargs: Any) -> Node:
    """Build a normalized document tree from a parsed markup tree.

    The markup tree is converted node by node, a root Item is wrapped in a
    List, and every remaining Item is put inside a List container.

    Parameters
    ----------
    source : markup node or str
        Root of the tree produced by the markup parser
    options : BuildOptions, optional
        Build options. Defaults to ``BuildOptions()``.
    kwargs : Any
        Individual options that override settings in ``options``
        (e.g. ``merge_adjacent_items=True``).

    Returns
    -------
    Node
        Root of the normalized tree. The caller owns it exclusively.

    Raises
    ------
    UnrecognizedNodeKindError
        If the markup tree contains a node the converter has no rule for
    TreeInvariantError
        If ``check_invariants`` is enabled and the finished tree is inconsistent
    RecursionError
        If the markup is nested deeper than the interpreter recursion limit allows

    Notes
    -----
    Conversion and list normalization recurse once per nesting level, and
    conversion uses a few stack frames per level. With the default recursion
    limit of 1000, markup nested more than a few hundred levels deep raises
    RecursionError. Raise the limit with ``sys.setrecursionlimit`` for such
    input.

    Examples
    --------
    >>> from podtree import build_tree
    >>> from podtree.markup import NamedBlock, Para
    >>> root = build_tree(NamedBlock(name="pod", contents=[Para(contents=["hi"])]))
    >>> root.kind, root.first_child.kind
    ('Document', 'Paragraph')

    """
    final_options = options or BuildOptions()
    if kwargs:
        final_options = final_options.create_updated(**kwargs)

    with debug_timer(logger, "Building tree"):
        tree = MarkupConverter().convert(source)
        tree = fixup_root(tree)
        created = normalize_lists(tree, merge_adjacent=final_options.merge_adjacent_items)
        logger.debug(f"List normalization created {created} List nodes")

        if final_options.check_invariants:
            check_invariants(tree)

    return tree
