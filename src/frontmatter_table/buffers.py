#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/buffers.py
"""Line-indexed views over a source document.

The boundary scanner and the decoder only need two things from a document:
the trimmed text of a line and the raw text of a line range. ``LineBuffer``
captures that contract; ``StateBlockBuffer`` serves it from markdown-it's block
state and ``TextBuffer`` from a plain string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from markdown_it.rules_block import StateBlock


class LineBuffer(Protocol):
    """Read-only, line-indexed access to a document."""

    @property
    def line_count(self) -> int:
        """Number of lines available; indices at or past it are out of range."""
        ...

    def get_line(self, index: int) -> str:
        """Return line ``index`` with surrounding whitespace removed."""
        ...

    def get_text(self, begin: int, end: int) -> str:
        """Return lines ``begin`` to ``end - 1`` joined with newlines.

        Indentation of the first line is removed from every line so nested
        structure in the returned text stays relative.
        """
        ...


class StateBlockBuffer:
    """LineBuffer over a markdown-it ``StateBlock``, bounded by a container limit.

    Parameters
    ----------
    state : StateBlock
        Host block state
    limit : int
        Enclosing container's end line (exclusive), as handed to block rules

    """

    def __init__(self, state: StateBlock, limit: int):
        """Wrap ``state`` up to line ``limit``."""
        self.state = state
        self.limit = limit

    @property
    def line_count(self) -> int:
        """Number of lines inside the enclosing container."""
        return self.limit

    def get_line(self, index: int) -> str:
        """Return the trimmed text of line ``index``, or "" if out of range."""
        if index < 0 or index >= self.limit:
            return ""
        state = self.state
        return state.src[state.bMarks[index] + state.tShift[index] : state.eMarks[index]].strip()

    def get_text(self, begin: int, end: int) -> str:
        """Return the source of lines ``begin`` to ``end - 1``."""
        if begin >= end:
            return ""
        return self.state.getLines(begin, end, self.state.tShift[begin], False)


class TextBuffer:
    """LineBuffer over a plain string.

    Parameters
    ----------
    text : str
        Document text. CRLF and CR line endings are normalized to LF.

    """

    def __init__(self, text: str):
        """Split ``text`` into lines."""
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        self.lines = normalized.split("\n")

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return len(self.lines)

    def get_line(self, index: int) -> str:
        """Return the trimmed text of line ``index``, or "" if out of range."""
        if index < 0 or index >= len(self.lines):
            return ""
        return self.lines[index].strip()

    def get_text(self, begin: int, end: int) -> str:
        """Return lines ``begin`` to ``end - 1``, dedented by the first line's indentation."""
        selected = self.lines[max(begin, 0) : min(end, len(self.lines))]
        if not selected:
            return ""

        first = selected[0]
        indent = len(first) - len(first.lstrip(" \t"))
        return "\n".join(_strip_indent(line, indent) for line in selected)


def _strip_indent(line: str, indent: int) -> str:
    remove = 0
    while remove < indent and remove < len(line) and line[remove] in " \t":
        remove += 1
    return line[remove:]
