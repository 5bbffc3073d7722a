#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Render YAML front matter blocks in Markdown as HTML tables.

A block opens with a start delimiter (``---`` followed by ``#yaml``, or
``#yaml-v`` for one row per key) and closes with ``---``. Its content is
decoded as YAML; a non-empty mapping becomes a table, with lists nested as
tables inside cells. Anything else is left to ordinary Markdown parsing.

Examples
--------
    >>> from frontmatter_table import render_markdown
    >>> html = render_markdown("---\\n#yaml\\ntitle: Hello\\ntags: [a, b]\\n---\\n")

    >>> from markdown_it import MarkdownIt
    >>> from frontmatter_table import frontmatter_table_plugin
    >>> md = MarkdownIt().use(frontmatter_table_plugin, class_name="meta")

"""

__version__ = "0.1.0"

from frontmatter_table.api import (
    FrontmatterBlock,
    build_tables,
    create_markdown,
    iter_blocks,
    render_markdown,
)
from frontmatter_table.builder import TableNode, TableTokenBuilder
from frontmatter_table.exceptions import (
    DecodeError,
    FrontmatterTableError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from frontmatter_table.options import FrontmatterTableOptions
from frontmatter_table.plugin import FrontmatterTablePlugin, frontmatter_table_plugin
from frontmatter_table.values import ValueShape, classify, coerce_text

__all__ = [
    "__version__",
    "DecodeError",
    "FrontmatterBlock",
    "FrontmatterTableError",
    "FrontmatterTableOptions",
    "FrontmatterTablePlugin",
    "InvalidOptionsError",
    "ParsingError",
    "TableNode",
    "TableTokenBuilder",
    "ValidationError",
    "ValueShape",
    "build_tables",
    "classify",
    "coerce_text",
    "create_markdown",
    "frontmatter_table_plugin",
    "iter_blocks",
    "render_markdown",
]
