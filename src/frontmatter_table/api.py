#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/api.py
"""High-level entry points.

``create_markdown`` and ``render_markdown`` render whole documents through
markdown-it with the plugin installed. ``iter_blocks`` and ``build_tables``
run the same scanning, decoding and table building over a plain string without
a Markdown parser, which is useful for inspecting what a document contains.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from markdown_it import MarkdownIt

from frontmatter_table.buffers import TextBuffer
from frontmatter_table.builder import TableNode, TableTokenBuilder
from frontmatter_table.constants import LayoutType
from frontmatter_table.decoder import decode_block
from frontmatter_table.exceptions import DecodeError
from frontmatter_table.options import FrontmatterTableOptions, resolve_options
from frontmatter_table.plugin import frontmatter_table_plugin
from frontmatter_table.scanner import BoundaryScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontmatterBlock:
    """A recognized front matter block.

    Parameters
    ----------
    start_line : int
        First line of the start delimiter (0-based)
    end_line : int
        Last line of the end delimiter (0-based)
    vertical : bool
        Whether the vertical start delimiter was used
    data : dict
        Decoded mapping, keys in document order

    """

    start_line: int
    end_line: int
    vertical: bool
    data: dict[Any, Any]

    @property
    def layout(self) -> LayoutType:
        """Table layout selected by the start delimiter."""
        return "vertical" if self.vertical else "horizontal"


def iter_blocks(text: str, options: Optional[FrontmatterTableOptions] = None, **overrides: Any) -> Iterator[FrontmatterBlock]:
    """Yield every front matter block in ``text``.

    Lines are scanned top to bottom. After an accepted block, scanning resumes
    on the line following its end delimiter; a rejected candidate is skipped
    one line at a time like any other text.

    Parameters
    ----------
    text : str
        Document text
    options : FrontmatterTableOptions, optional
        Delimiters, decoder and ``allow_anywhere``
    **overrides : Any
        Option fields overriding ``options``

    Yields
    ------
    FrontmatterBlock
        Each accepted block

    """
    resolved = resolve_options(options, **overrides)
    scanner = BoundaryScanner(resolved)
    buffer = TextBuffer(text)

    line = 0
    last = buffer.line_count if resolved.allow_anywhere else min(1, buffer.line_count)
    while line < last:
        block = _read_block(scanner, buffer, line, resolved)
        if block is None:
            line += 1
            continue
        yield block
        line = block.end_line + 1


def _read_block(
    scanner: BoundaryScanner, buffer: TextBuffer, line: int, options: FrontmatterTableOptions
) -> Optional[FrontmatterBlock]:
    raw = buffer.lines[line]
    indent = len(raw) - len(raw.lstrip(" \t"))
    start = scanner.detect_start(buffer, line, indent=indent)
    if not start.matched:
        return None

    block_end = scanner.find_end(buffer, start.last_line)
    if block_end is None:
        return None

    try:
        data = decode_block(buffer, start.last_line + 1, block_end - 1, options.decoder)
    except DecodeError as e:
        logger.debug("Ignoring block at line %d: %s", line, e.reason)
        return None

    return FrontmatterBlock(
        start_line=line,
        end_line=block_end + scanner.end_height - 1,
        vertical=start.vertical,
        data=data,
    )


def build_tables(
    text: str, options: Optional[FrontmatterTableOptions] = None, **overrides: Any
) -> list[list[TableNode]]:
    """Return the table nodes for every front matter block in ``text``.

    Parameters
    ----------
    text : str
        Document text
    options : FrontmatterTableOptions, optional
        Plugin configuration
    **overrides : Any
        Option fields overriding ``options``

    Returns
    -------
    list[list[TableNode]]
        One node sequence per block, in document order

    """
    resolved = resolve_options(options, **overrides)
    builder = TableTokenBuilder()
    tables = []
    for block in iter_blocks(text, resolved):
        marker = resolved.start_marker_vertical if block.vertical else resolved.start_marker
        tables.append(
            builder.build(
                block.data,
                layout=block.layout,
                source_map=(block.start_line, block.end_line),
                attrs=resolved.table_attributes(),
                markup=(marker, resolved.end_marker),
            )
        )
    return tables


def create_markdown(
    options: Optional[FrontmatterTableOptions] = None, preset: str = "commonmark", **overrides: Any
) -> MarkdownIt:
    """Create a markdown-it parser with front matter tables enabled.

    Parameters
    ----------
    options : FrontmatterTableOptions, optional
        Plugin configuration
    preset : str, default = "commonmark"
        markdown-it preset name
    **overrides : Any
        Option fields overriding ``options``

    Returns
    -------
    MarkdownIt
        Configured parser

    """
    md = MarkdownIt(preset)
    frontmatter_table_plugin(md, options, **overrides)
    return md


def render_markdown(text: str, options: Optional[FrontmatterTableOptions] = None, **overrides: Any) -> str:
    """Render a Markdown document to HTML with front matter tables.

    Examples
    --------
        >>> render_markdown("---\\n#yaml-v\\ntitle: Hello\\n---\\n")
        '<table>\\n<tbody>\\n<tr>\\n<th>title</th>\\n<td>Hello</td>\\n</tr>\\n</tbody>\\n</table>\\n'

    """
    return create_markdown(options, **overrides).render(text)
