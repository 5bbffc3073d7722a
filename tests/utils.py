"""Test utilities for the frontmatter_table test suite.

Helpers turn flat node or token sequences back into a nested structure so
tests can assert on rows and cells instead of node positions.
"""

from typing import Any, Sequence

_OPEN_TABLE = ("open", "nested_open")
_CLOSE_TABLE = ("close", "nested_close")


def _kind(node: Any, prefix: str) -> str:
    """Return the node kind, stripping a token type prefix."""
    kind = getattr(node, "kind", None)
    if kind is not None:
        return kind
    token_type = node.type
    if token_type == "inline":
        return "inline"
    return token_type[len(prefix) + 1 :]


def parse_table(nodes: Sequence[Any], pos: int = 0, prefix: str = "yaml-frontmatter") -> tuple[dict, int]:
    """Parse one table starting at ``pos``.

    Works on builder ``TableNode`` lists and on markdown-it token lists.

    Returns
    -------
    tuple[dict, int]
        ``{"head": rows, "body": rows}`` where each cell is its text, a nested
        table dict, or None for an empty cell; and the position after the table

    """
    assert _kind(nodes[pos], prefix) in _OPEN_TABLE, f"expected table open at {pos}"
    pos += 1
    table: dict = {"head": [], "body": []}
    section = "body"

    while True:
        kind = _kind(nodes[pos], prefix)
        if kind in _CLOSE_TABLE:
            return table, pos + 1
        if kind == "thead_open":
            section = "head"
            pos += 1
        elif kind == "tbody_open":
            section = "body"
            pos += 1
        elif kind in ("thead_close", "tbody_close"):
            pos += 1
        elif kind == "tr_open":
            pos += 1
            row: list = []
            while _kind(nodes[pos], prefix) != "tr_close":
                cell_kind = _kind(nodes[pos], prefix)
                assert cell_kind in ("th_open", "td_open"), f"unexpected {cell_kind} in row"
                pos += 1
                content: Any = None
                inner = _kind(nodes[pos], prefix)
                if inner == "inline":
                    content = nodes[pos].content
                    pos += 1
                elif inner in _OPEN_TABLE:
                    content, pos = parse_table(nodes, pos, prefix)
                assert _kind(nodes[pos], prefix) == cell_kind.replace("_open", "_close")
                pos += 1
                row.append(content)
            pos += 1
            table[section].append(row)
        else:
            raise AssertionError(f"unexpected node kind {kind!r} at {pos}")


def assert_balanced(nodes: Sequence[Any], prefix: str = "yaml-frontmatter") -> None:
    """Assert every open node is closed by a node of the same tag, stack-wise."""
    stack: list[str] = []
    for node in nodes:
        if node.nesting == 1:
            stack.append(node.tag)
        elif node.nesting == -1:
            assert stack, f"unmatched close {_kind(node, prefix)}"
            assert stack.pop() == node.tag
        else:
            assert _kind(node, prefix) == "inline"
    assert not stack, f"unclosed tags: {stack}"


def frontmatter_tokens(tokens: Sequence[Any], prefix: str = "yaml-frontmatter") -> list[Any]:
    """Return the tokens whose type carries the plugin prefix."""
    return [token for token in tokens if token.type.startswith(prefix + "_")]
