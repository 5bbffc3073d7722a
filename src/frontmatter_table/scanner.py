#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/scanner.py
"""Delimiter recognition for front matter table blocks.

A block is a start delimiter (plain or vertical), some content, and an end
delimiter. The scanner decides whether a start delimiter begins at a line and
finds the matching end delimiter within the enclosing container. Not finding
one is an ordinary outcome, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from frontmatter_table.buffers import LineBuffer
from frontmatter_table.options import FrontmatterTableOptions, marker_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartMatch:
    """Result of probing a line for a start delimiter.

    Parameters
    ----------
    matched : bool
        Whether a start delimiter begins at the probed line
    vertical : bool
        Whether the vertical variant matched
    marker : str
        The delimiter text that matched, "" if none
    last_line : int
        Index of the delimiter's last line, -1 if none

    """

    matched: bool
    vertical: bool = False
    marker: str = ""
    last_line: int = -1


NO_MATCH = StartMatch(matched=False)


class BoundaryScanner:
    """Recognize start and end delimiters in a ``LineBuffer``.

    Parameters
    ----------
    options : FrontmatterTableOptions
        Supplies the delimiters and the ``allow_anywhere`` flag

    """

    def __init__(self, options: FrontmatterTableOptions):
        """Precompute the trimmed delimiter lines."""
        self.options = options
        self._start_lines = marker_lines(options.start_marker)
        self._vertical_lines = marker_lines(options.start_marker_vertical)
        self._end_lines = marker_lines(options.end_marker)

    @property
    def end_height(self) -> int:
        """Number of lines the end delimiter spans."""
        return len(self._end_lines)

    def matches(self, buffer: LineBuffer, line: int, lines: list[str]) -> bool:
        """Return True if every delimiter line equals the buffer line at the same offset."""
        if line < 0 or line + len(lines) > buffer.line_count:
            return False
        return all(buffer.get_line(line + offset) == expected for offset, expected in enumerate(lines))

    def detect_start(self, buffer: LineBuffer, line: int, indent: int = 0) -> StartMatch:
        """Probe ``line`` for a start delimiter.

        Parameters
        ----------
        buffer : LineBuffer
            Document lines
        line : int
            Line to probe
        indent : int, default = 0
            Indentation of the probed line relative to the document; only
            consulted when blocks are restricted to the document start

        Returns
        -------
        StartMatch
            The vertical delimiter wins if both variants match

        """
        if not self.options.allow_anywhere and (line != 0 or indent > 0):
            return NO_MATCH

        if self.matches(buffer, line, self._vertical_lines):
            return StartMatch(
                matched=True,
                vertical=True,
                marker=self.options.start_marker_vertical,
                last_line=line + len(self._vertical_lines) - 1,
            )
        if self.matches(buffer, line, self._start_lines):
            return StartMatch(
                matched=True,
                vertical=False,
                marker=self.options.start_marker,
                last_line=line + len(self._start_lines) - 1,
            )
        return NO_MATCH

    def find_end(self, buffer: LineBuffer, start_line: int, limit: Optional[int] = None) -> Optional[int]:
        """Find the first end delimiter after ``start_line``.

        Parameters
        ----------
        buffer : LineBuffer
            Document lines
        start_line : int
            Last line of the start delimiter; the search begins on the next line
        limit : int, optional
            Exclusive upper bound, defaults to ``buffer.line_count``

        Returns
        -------
        int or None
            First line of the end delimiter, or None if absent before ``limit``

        """
        end = buffer.line_count if limit is None else min(limit, buffer.line_count)
        for line in range(start_line + 1, end):
            if self.matches(buffer, line, self._end_lines) and line + len(self._end_lines) <= end:
                return line

        logger.debug("No end delimiter after line %d before line %d", start_line, end)
        return None
