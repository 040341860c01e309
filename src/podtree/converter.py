#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/podtree/converter.py
"""Markup tree to document tree converter.

This module maps each node of an externally parsed markup tree (see
:mod:`podtree.markup`) onto one :mod:`podtree.nodes` node, converting
children recursively and linking them with :func:`podtree.tree.append_child`.

The mapping is closed: a markup object of any other type raises
:class:`~podtree.exceptions.UnrecognizedNodeKindError`, which is not caught
here.

"""

from __future__ import annotations

import logging
from typing import Any

from podtree.exceptions import UnrecognizedNodeKindError
from podtree.markup import (
    Block,
    CodeBlock,
    CommentBlock,
    FormattingCode,
    HeadingBlock,
    ItemBlock,
    NamedBlock,
    Para,
    TableBlock,
)
from podtree.nodes import (
    Bold,
    Code,
    Comment,
    Document,
    Entity,
    Heading,
    Item,
    Link,
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
from podtree.tree import append_child

logger = logging.getLogger(__name__)

#: Name of the named block that becomes the Document root.
DOCUMENT_BLOCK_NAME = "pod"


class MarkupConverter:
    """Convert markup nodes into document tree nodes.

    The converter holds no state between calls and may be reused.

    Examples
    --------
    >>> from podtree.markup import NamedBlock, Para
    >>> tree = MarkupConverter().convert(NamedBlock(name="pod", contents=[Para(contents=["hi"])]))
    >>> tree.first_child.first_child.value
    'hi'

    """

    def convert(self, source: Any) -> Node:
        """Convert one markup node, and its descendants, to a tree node.

        Parameters
        ----------
        source : markup node or str
            Node produced by the markup parser

        Returns
        -------
        Node
            Root of the converted subtree

        Raises
        ------
        UnrecognizedNodeKindError
            If ``source`` is not a supported markup type

        """
        node = self._dispatch(source)
        if isinstance(source, Block):
            logger.debug(f"Converted {type(source).__name__} to {node.kind}")
        return node

    def _dispatch(self, source: Any) -> Node:  # noqa: C901
        if isinstance(source, str):
            return Text(value=source)
        elif isinstance(source, CodeBlock):
            return self.convert_children(Code(), source)
        elif isinstance(source, CommentBlock):
            return self.convert_children(Comment(), source)
        elif isinstance(source, Para):
            return self.convert_children(Paragraph(), source)
        elif isinstance(source, NamedBlock):
            return self._convert_named_block(source.name, source)
        elif isinstance(source, TableBlock):
            return self._convert_table(source)
        elif isinstance(source, FormattingCode):
            return self._convert_formatting_code(source)
        elif isinstance(source, HeadingBlock):
            return self.convert_children(Heading(level=source.level), source)
        elif isinstance(source, ItemBlock):
            return self.convert_children(Item(level=source.level), source)

        raise UnrecognizedNodeKindError(source)

    def convert_children(self, target: Node, source: Any) -> Node:
        """Convert each element of ``source.contents`` and append it to ``target``.

        Source order is preserved exactly.

        Parameters
        ----------
        target : Node
            Node receiving the converted children
        source : markup node
            Node whose ``contents`` to convert

        Returns
        -------
        Node
            ``target``, for chaining

        """
        for element in source.contents:
            append_child(target, self.convert(element))
        return target

    def _convert_named_block(self, name: str, source: Any) -> Node:
        """Convert a named block into a Document or a titled Section."""
        if name == DOCUMENT_BLOCK_NAME:
            node: Node = Document()
        else:
            node = Section(title=name)
        return self.convert_children(node, source)

    def _convert_table(self, source: TableBlock) -> Table:
        """Convert a table into header and body containers.

        Each cell becomes one TableData wrapping the converted cell value.
        """
        table = Table()

        if source.headers:
            header = TableHeader()
            for cell in source.headers:
                append_child(header, self._convert_cell(cell))
            append_child(table, header)

        if source.contents:
            body = TableBody()
            for row in source.contents:
                body_row = TableBodyRow()
                for cell in row:
                    append_child(body_row, self._convert_cell(cell))
                append_child(body, body_row)
            append_child(table, body)

        logger.debug(
            f"Converted table with {len(source.headers)} header cells and {len(source.contents)} body rows"
        )
        return table

    def _convert_cell(self, cell: Any) -> TableData:
        data = TableData()
        append_child(data, self.convert(cell))
        return data

    def _convert_formatting_code(self, source: FormattingCode) -> Node:
        """Dispatch an inline formatting span on its code letter."""
        code = source.type
        if code == "B":
            return self.convert_children(Bold(), source)
        elif code == "C":
            return self.convert_children(Code(), source)
        elif code == "E":
            # Entities keep their contents as-is
            return Entity(contents=source.contents)
        elif code == "L":
            return self.convert_children(Link(url=_link_target(source)), source)
        elif code == "X":
            return self.convert_children(Reference(), source)

        logger.debug(f"No inline mapping for formatting code '{code}', converting as Section")
        return self._convert_named_block(code, source)


def _link_target(source: FormattingCode) -> str:
    """Return the link target: the explicit ``meta`` target, else the link text."""
    if source.meta:
        return str(source.meta[0])
    return "".join(part for part in source.contents if isinstance(part, str))


def convert(source: Any) -> Node:
    """Convert a markup node to a document tree node.

    Parameters
    ----------
    source : markup node or str
        Node produced by the markup parser

    Returns
    -------
    Node
        Root of the converted tree, not yet list-normalized

    """
    return MarkupConverter().convert(source)
