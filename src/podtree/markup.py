#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/podtree/markup.py
"""Markup tree types consumed by the converter.

These classes describe the shape of the tree an external documentation-markup
parser hands over. Every block exposes an ordered ``contents`` list whose
elements are either further markup nodes or plain ``str`` text runs.

The converter accepts exactly these types (plus ``str``); anything else is
rejected with :class:`~podtree.exceptions.UnrecognizedNodeKindError`.

Examples
--------
    >>> from podtree.markup import NamedBlock, Para
    >>> pod = NamedBlock(name="pod", contents=[Para(contents=["hi"])])

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

#: Anything that may appear in a ``contents`` list.
MarkupNode = Union["Block", "FormattingCode", str]


@dataclass
class Block:
    """Base class for block-level markup nodes.

    Parameters
    ----------
    contents : list
        Ordered child nodes (markup nodes or strings)
    config : dict, default = empty dict
        Block configuration options as given in the source

    """

    contents: list[Any] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)


@dataclass
class NamedBlock(Block):
    """A named block such as ``=begin pod`` or a custom ``=begin NAME``."""

    name: str = "pod"


@dataclass
class Para(Block):
    """A paragraph of prose."""


@dataclass
class CodeBlock(Block):
    """A verbatim code block."""


@dataclass
class CommentBlock(Block):
    """A comment block."""


@dataclass
class HeadingBlock(Block):
    """A heading of the given level."""

    level: int = 1


@dataclass
class ItemBlock(Block):
    """One list entry of the given nesting level."""

    level: int = 1


@dataclass
class TableBlock(Block):
    """A table.

    Parameters
    ----------
    headers : list
        Header cells, one value per column
    contents : list of list
        Body rows, each a list of cell values
    caption : str, default = ""
        Table caption

    """

    headers: list[Any] = field(default_factory=list)
    caption: str = ""


@dataclass
class FormattingCode:
    """An inline formatting span such as ``B<...>`` or ``L<...>``.

    Parameters
    ----------
    type : str
        Single-letter formatting code (``B``, ``C``, ``E``, ``L``, ``X``, ...)
    contents : list
        Ordered inline children
    meta : list
        Extra data following ``|`` inside the code (link target, entity names)

    """

    type: str
    contents: list[Any] = field(default_factory=list)
    meta: list[Any] = field(default_factory=list)
