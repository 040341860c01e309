"""Pytest configuration and shared fixtures for the podtree test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from podtree.markup import (
    FormattingCode,
    HeadingBlock,
    ItemBlock,
    NamedBlock,
    Para,
    TableBlock,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_pod() -> NamedBlock:
    """Provide a markup tree exercising every block kind.

    Returns
    -------
    NamedBlock
        A ``pod`` block with a heading, prose, a list run, a custom block and a table.

    """
    return NamedBlock(
        name="pod",
        contents=[
            HeadingBlock(level=1, contents=["NAME"]),
            Para(
                contents=[
                    "See ",
                    FormattingCode(type="L", contents=["the docs"], meta=["https://example.com/docs"]),
                    " for ",
                    FormattingCode(type="B", contents=["details"]),
                    ".",
                ]
            ),
            ItemBlock(level=1, contents=["first"]),
            ItemBlock(level=1, contents=["second"]),
            NamedBlock(name="SYNOPSIS", contents=[Para(contents=["usage"])]),
            TableBlock(headers=["Key", "Value"], contents=[["a", "1"], ["b", "2"]]),
        ],
    )
