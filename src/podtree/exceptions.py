#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the podtree library.

This module defines the exception classes raised while converting a parsed
markup tree into a navigable document tree. They carry more specific error
information than generic built-ins.

Exception Hierarchy
-------------------
- PodTreeError (base exception)

  - UnrecognizedNodeKindError (markup node with no conversion rule)

  - TreeInvariantError (navigation pointers out of sync)

"""

from typing import Any


class PodTreeError(Exception):
    """Base exception class for all podtree-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class UnrecognizedNodeKindError(PodTreeError):
    """Exception raised when a markup node has no conversion rule.

    The converter handles a closed set of markup node types. Anything else
    reaching it is a contract violation by the upstream parser or caller,
    and there is no safe default conversion.

    Parameters
    ----------
    node : any
        The markup object that could not be converted
    message : str, optional
        Custom error message. If not provided, one is generated from the node

    Attributes
    ----------
    node : any
        The unconverted markup object

    """

    def __init__(self, node: Any, message: str | None = None):
        """Initialize the error with the offending markup node."""
        if message is None:
            message = f"Unrecognized markup node of type '{type(node).__name__}': {node!r}"
        super().__init__(message)
        self.node = node


class TreeInvariantError(PodTreeError):
    """Exception raised when a tree's navigation pointers are inconsistent.

    Parameters
    ----------
    message : str
        Description of the violation
    invariant : int
        Number of the violated invariant (1-5)
    node : Node, optional
        The node at which the violation was detected

    Attributes
    ----------
    invariant : int
        Number of the violated invariant
    node : Node or None
        Offending node

    """

    def __init__(self, message: str, invariant: int, node: Any = None):
        """Initialize the invariant error."""
        super().__init__(message)
        self.invariant = invariant
        self.node = node
