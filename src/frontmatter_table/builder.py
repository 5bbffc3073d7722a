#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/builder.py
"""Build table nodes from decoded front matter.

The builder turns a non-empty mapping into a flat, balanced sequence of
``TableNode`` objects using a fixed vocabulary (table, thead, tbody, tr, th,
td, nested table and inline leaves). It knows nothing about the host parser;
the plugin replays the sequence into markdown-it tokens.

Layouts
-------
**horizontal** (one column per key)::

    open
      thead_open  tr_open  th(key)...  tr_close  thead_close
      tbody_open  tr_open  td(value)...  tr_close  tbody_close
    close

**vertical** (one row per key)::

    open
      tbody_open
        tr_open  th(key)  td(value)  tr_close   (repeated per key)
      tbody_close
    close

Cell values
-----------
A list value becomes a nested table inside the cell:

- a list of scalars becomes a single body row, one cell per item
- a list of records becomes a header row of the first record's keys and one
  body row per record, recursing into list-valued fields
- an empty or mixed list produces nothing, leaving the cell empty
- a list reached again through a YAML alias inside itself produces nothing

Anything else, including a mapping that is not inside a list, is coerced to
text with ``coerce_text``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from frontmatter_table.constants import LayoutType
from frontmatter_table.values import MISSING, ValueShape, classify, coerce_text, is_list

logger = logging.getLogger(__name__)

SourceMap = tuple[int, int]

_TAGS = {
    "open": "table",
    "close": "table",
    "nested_open": "table",
    "nested_close": "table",
    "thead_open": "thead",
    "thead_close": "thead",
    "tbody_open": "tbody",
    "tbody_close": "tbody",
    "tr_open": "tr",
    "tr_close": "tr",
    "th_open": "th",
    "th_close": "th",
    "td_open": "td",
    "td_close": "td",
    "inline": "",
}


@dataclass
class TableNode:
    """One node of an emitted table.

    Parameters
    ----------
    kind : str
        Node kind from the fixed vocabulary, e.g. ``tr_open`` or ``inline``
    nesting : int
        1 for open nodes, -1 for close nodes, 0 for inline leaves
    map : tuple[int, int] or None
        Source line span of the originating block; None on close nodes
    content : str or None
        Cell text, inline leaves only
    attrs : list[tuple[str, str]]
        Attributes, outermost ``open`` node only
    markup : str
        Delimiter text, outermost ``open`` and ``close`` nodes only

    """

    kind: str
    nesting: int
    map: Optional[SourceMap] = None
    content: Optional[str] = None
    attrs: list[tuple[str, str]] = field(default_factory=list)
    markup: str = ""

    @property
    def tag(self) -> str:
        """HTML tag for this node kind."""
        return _TAGS[self.kind]

    @property
    def block(self) -> bool:
        """True for the outermost table's open and close nodes."""
        return self.kind in ("open", "close")


class _NodeWriter:
    """Accumulates nodes for a single build call."""

    def __init__(self, source_map: Optional[SourceMap]):
        self.source_map = source_map
        self.nodes: list[TableNode] = []
        # ids of the lists currently being laid out, outermost first
        self.path: set[int] = set()

    def open(self, kind: str) -> TableNode:
        node = TableNode(kind=f"{kind}_open", nesting=1, map=self.source_map)
        self.nodes.append(node)
        return node

    def close(self, kind: str) -> TableNode:
        node = TableNode(kind=f"{kind}_close", nesting=-1)
        self.nodes.append(node)
        return node

    def text(self, content: str) -> None:
        self.nodes.append(TableNode(kind="inline", nesting=0, map=self.source_map, content=content))


class TableTokenBuilder:
    """Convert decoded front matter into a sequence of table nodes.

    The builder holds no state between calls: building the same value twice
    yields equal node sequences.

    Examples
    --------
        >>> builder = TableTokenBuilder()
        >>> nodes = builder.build({"title": "Hello", "tags": ["a", "b"]})
        >>> [n.content for n in nodes if n.kind == "inline"]
        ['title', 'tags', 'Hello', 'a', 'b']

    """

    def build(
        self,
        mapping: Mapping[Any, Any],
        layout: LayoutType = "horizontal",
        source_map: Optional[SourceMap] = None,
        attrs: Iterable[tuple[str, str]] = (),
        markup: tuple[str, str] = ("", ""),
    ) -> list[TableNode]:
        """Build the node sequence for one block.

        Parameters
        ----------
        mapping : Mapping
            Non-empty decoded front matter; key order is preserved
        layout : {"horizontal", "vertical"}, default = "horizontal"
            One column per key, or one row per key
        source_map : tuple[int, int], optional
            First and last line of the block
        attrs : iterable of (name, value)
            Attributes for the outermost table node
        markup : tuple[str, str]
            Start and end delimiter texts recorded on the outermost nodes

        Returns
        -------
        list[TableNode]
            Balanced node sequence starting with ``open`` and ending with ``close``

        Raises
        ------
        ValueError
            If ``layout`` is not a known layout

        """
        if layout not in ("horizontal", "vertical"):
            raise ValueError(f"Unknown table layout: {layout!r}")

        writer = _NodeWriter(source_map)
        keys = list(mapping.keys())

        writer.nodes.append(TableNode(kind="open", nesting=1, map=source_map, attrs=list(attrs), markup=markup[0]))

        if layout == "vertical":
            self._vertical_body(writer, keys, mapping)
        else:
            self._horizontal_body(writer, keys, mapping)

        writer.nodes.append(TableNode(kind="close", nesting=-1, markup=markup[1]))

        logger.debug("Built %s table with %d keys (%d nodes)", layout, len(keys), len(writer.nodes))
        return writer.nodes

    def _horizontal_body(self, writer: _NodeWriter, keys: Sequence[Any], mapping: Mapping[Any, Any]) -> None:
        writer.open("thead")
        self._header_row(writer, keys)
        writer.close("thead")

        writer.open("tbody")
        writer.open("tr")
        for key in keys:
            self._cell(writer, "td", mapping[key])
        writer.close("tr")
        writer.close("tbody")

    def _vertical_body(self, writer: _NodeWriter, keys: Sequence[Any], mapping: Mapping[Any, Any]) -> None:
        writer.open("tbody")
        for key in keys:
            writer.open("tr")
            self._cell(writer, "th", coerce_text(key))
            self._cell(writer, "td", mapping[key])
            writer.close("tr")
        writer.close("tbody")

    def _header_row(self, writer: _NodeWriter, keys: Sequence[Any]) -> None:
        writer.open("tr")
        for key in keys:
            writer.open("th")
            writer.text(coerce_text(key))
            writer.close("th")
        writer.close("tr")

    def _cell(self, writer: _NodeWriter, cell_kind: str, value: Any) -> None:
        """Emit one cell, nesting a table for list values."""
        writer.open(cell_kind)
        if is_list(value):
            self._nested_table(writer, value)
        else:
            writer.text(coerce_text(value))
        writer.close(cell_kind)

    def _nested_table(self, writer: _NodeWriter, items: Sequence[Any]) -> None:
        if id(items) in writer.path:
            logger.debug("Skipping nested table for a list that contains itself")
            return

        writer.path.add(id(items))
        try:
            self._nested_body(writer, items)
        finally:
            writer.path.discard(id(items))

    def _nested_body(self, writer: _NodeWriter, items: Sequence[Any]) -> None:
        shape = classify(items)

        if shape is ValueShape.PRIMITIVE_LIST:
            writer.open("nested")
            writer.open("tbody")
            writer.open("tr")
            for item in items:
                self._cell(writer, "td", item)
            writer.close("tr")
            writer.close("tbody")
            writer.close("nested")

        elif shape is ValueShape.RECORD_LIST:
            # Columns come from the first record only
            columns = list(items[0].keys())
            writer.open("nested")

            writer.open("thead")
            self._header_row(writer, columns)
            writer.close("thead")

            writer.open("tbody")
            for record in items:
                writer.open("tr")
                for column in columns:
                    self._cell(writer, "td", record.get(column, MISSING))
                writer.close("tr")
            writer.close("tbody")

            writer.close("nested")

        else:
            logger.debug("Skipping nested table for %s value with %d items", shape.value, len(items))
