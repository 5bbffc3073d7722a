"""Pytest configuration and shared fixtures for the frontmatter_table test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import pytest
from markdown_it import MarkdownIt

from frontmatter_table import FrontmatterTableOptions, frontmatter_table_plugin

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - plugin running inside markdown-it")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def default_options() -> FrontmatterTableOptions:
    """Provide default plugin options."""
    return FrontmatterTableOptions()


@pytest.fixture
def md() -> MarkdownIt:
    """Provide a commonmark parser with the plugin installed using default options."""
    parser = MarkdownIt()
    frontmatter_table_plugin(parser)
    return parser


@pytest.fixture
def horizontal_document() -> str:
    """Provide a document with one horizontal front matter block after some prose."""
    return """# Release notes

---
#yaml
title: Hello
tags: [a, b]
---

Body text.
"""


@pytest.fixture
def vertical_document() -> str:
    """Provide a document starting with a vertical front matter block of records."""
    return """---
#yaml-v
items:
  - name: x
    qty: 1
  - name: y
    qty: 2
---
"""
