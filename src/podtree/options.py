"""Options controlling how a markup tree is built and normalized.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BuildOptions(CloneFrozenMixin):
    """Configuration for :func:`podtree.build_tree`.

    Parameters
    ----------
    merge_adjacent_items : bool, default False
        Put a run of adjacent Item siblings into one shared List. When False,
        each Item gets its own List wrapper.
    check_invariants : bool, default False
        Verify the navigation invariants of the finished tree and raise
        TreeInvariantError if any is broken.

    """

    merge_adjacent_items: bool = field(
        default=False,
        metadata={
            "help": "Wrap runs of adjacent list items in a single List instead of one List per item",
            "importance": "core",
        },
    )
    check_invariants: bool = field(
        default=False,
        metadata={
            "help": "Validate parent/sibling/child pointers of the finished tree",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate field types.

        Raises
        ------
        ValueError
            If a flag is not a bool.

        """
        for name in ("merge_adjacent_items", "check_invariants"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a bool, got {type(value).__name__}")
