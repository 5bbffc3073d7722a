#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/plugin.py
"""markdown-it plugin rendering front matter blocks as tables.

The plugin registers a block rule ahead of ``fence`` that recognizes a
delimited YAML block, decodes it, and replays the table builder's nodes into
the token stream. It also registers a render rule for every table token type
it produces.

Examples
--------
    >>> from markdown_it import MarkdownIt
    >>> md = MarkdownIt().use(frontmatter_table_plugin, class_name="meta")
    >>> html = md.render("---\\n#yaml\\ntitle: Hello\\n---\\n")

"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Optional

from frontmatter_table.buffers import StateBlockBuffer
from frontmatter_table.builder import TableNode, TableTokenBuilder
from frontmatter_table.constants import INSERT_BEFORE_RULE, RENDERED_NODE_KINDS, TERMINATES_RULES
from frontmatter_table.decoder import decode_block
from frontmatter_table.exceptions import DecodeError, InvalidOptionsError
from frontmatter_table.options import FrontmatterTableOptions, resolve_options
from frontmatter_table.scanner import BoundaryScanner

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.renderer import RendererHTML
    from markdown_it.rules_block import StateBlock
    from markdown_it.token import Token
    from markdown_it.utils import OptionsDict

logger = logging.getLogger(__name__)


@contextmanager
def scoped_block_state(state: StateBlock, parent_type: str, line_max: int) -> Iterator[StateBlock]:
    """Temporarily override ``parentType`` and ``lineMax`` on a block state.

    Both are restored on every exit path, including exceptions.
    """
    old_parent = state.parentType
    old_line_max = state.lineMax
    state.parentType = parent_type  # type: ignore[assignment]
    state.lineMax = line_max
    try:
        yield state
    finally:
        state.parentType = old_parent
        state.lineMax = old_line_max


class FrontmatterTablePlugin:
    """Block rule and render rules for one plugin installation.

    Each installation owns its options and render rules; several
    installations with different names can coexist on one parser.

    Parameters
    ----------
    options : FrontmatterTableOptions
        Plugin configuration. May be replaced between renders; attribute
        injection reads the current value every time. The token type prefix
        (``name``) is fixed when the plugin is created, and replacing the
        options with a different ``name`` raises ``InvalidOptionsError``.

    """

    def __init__(self, options: FrontmatterTableOptions):
        """Create the scanner and builder for ``options``."""
        self.builder = TableTokenBuilder()
        self._options = resolve_options(options)
        self.name = self._options.name
        self.scanner = BoundaryScanner(self._options)

    @property
    def options(self) -> FrontmatterTableOptions:
        """Current configuration."""
        return self._options

    @options.setter
    def options(self, value: FrontmatterTableOptions) -> None:
        resolved = resolve_options(value)
        if resolved.name != self.name:
            raise InvalidOptionsError(
                f"Cannot rename installed plugin {self.name!r} to {resolved.name!r}; install a new plugin instead",
                parameter_name="name",
                parameter_value=resolved.name,
            )
        self._options = resolved
        self.scanner = BoundaryScanner(resolved)

    def token_type(self, kind: str) -> str:
        """Return the token type for node kind ``kind``."""
        if kind == "inline":
            return "inline"
        return f"{self.name}_{kind}"

    def install(self, md: MarkdownIt) -> None:
        """Register the block rule and render rules on ``md``."""
        md.block.ruler.before(
            INSERT_BEFORE_RULE,
            self.name,
            self.block_rule,
            {"alt": list(TERMINATES_RULES)},
        )

        render = self.options.render or self.render_default
        for kind in RENDERED_NODE_KINDS:
            md.add_render_rule(self.token_type(kind), _as_render_rule(render))

    def block_rule(self, state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
        """Recognize a front matter block starting at ``start_line``.

        Returns False, leaving ``state`` untouched, for anything that is not a
        complete block with a non-empty mapping inside.
        """
        buffer = StateBlockBuffer(state, end_line)
        indent = max(state.blkIndent, state.sCount[start_line])
        start = self.scanner.detect_start(buffer, start_line, indent=indent)
        if not start.matched:
            return False
        if silent:
            return True

        block_end = self.scanner.find_end(buffer, start.last_line, end_line)
        if block_end is None:
            return False

        try:
            data = decode_block(buffer, start.last_line + 1, block_end - 1, self.options.decoder)
        except DecodeError as e:
            logger.debug("Ignoring block at line %d: %s", start_line, e.reason)
            return False

        last_line = block_end + self.scanner.end_height - 1
        layout = "vertical" if start.vertical else "horizontal"
        nodes = self.builder.build(
            data,
            layout=layout,
            source_map=(start_line, last_line),
            attrs=self.options.table_attributes(),
            markup=(start.marker, self.options.end_marker),
        )

        with scoped_block_state(state, self.name, last_line):
            self.push_nodes(state, nodes)

        state.line = last_line + 1
        logger.debug("Rendered %s front matter table for lines %d-%d", layout, start_line, last_line)
        return True

    def push_nodes(self, state: StateBlock, nodes: Sequence[TableNode]) -> list[Token]:
        """Append ``nodes`` to the token stream as markdown-it tokens."""
        tokens = []
        for node in nodes:
            token = state.push(self.token_type(node.kind), node.tag, node.nesting)
            token.map = list(node.map) if node.map is not None else None
            if node.kind == "inline":
                token.content = node.content or ""
                token.children = []
            for name, value in node.attrs:
                token.attrSet(name, value)
            if node.markup:
                token.markup = node.markup
            if node.block:
                token.block = True
            tokens.append(token)
        return tokens

    def apply_table_attributes(self, token: Token) -> None:
        """Set the configured attributes on the outermost table token."""
        for name, value in self.options.table_attributes():
            token.attrSet(name, value)

    def render_default(
        self,
        renderer: RendererHTML,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: Any,
    ) -> str:
        """Render one plugin token.

        Nested tables render as bare ``<table>`` tags; everything else goes
        through the host's generic ``renderToken``.
        """
        token = tokens[idx]
        if token.type == self.token_type("open"):
            self.apply_table_attributes(token)
        elif token.type == self.token_type("nested_open"):
            return "<table>\n"
        elif token.type == self.token_type("nested_close"):
            return "</table>\n"
        return renderer.renderToken(tokens, idx, options, env)


def _as_render_rule(render: Any) -> Any:
    """Adapt ``render(renderer, tokens, idx, options, env)`` to a bindable render rule."""

    def rule(self: RendererHTML, tokens: Sequence[Token], idx: int, options: OptionsDict, env: Any) -> str:
        return render(self, tokens, idx, options, env)

    return rule


def frontmatter_table_plugin(
    md: MarkdownIt, options: Optional[FrontmatterTableOptions] = None, **overrides: Any
) -> FrontmatterTablePlugin:
    """Install front matter tables on a markdown-it parser.

    Parameters
    ----------
    md : MarkdownIt
        Parser to extend
    options : FrontmatterTableOptions, optional
        Plugin configuration
    **overrides : Any
        Option fields overriding ``options``, e.g. ``class_name="meta"``

    Returns
    -------
    FrontmatterTablePlugin
        The installed plugin

    Raises
    ------
    InvalidOptionsError
        If the options are of the wrong type or invalid

    """
    plugin = FrontmatterTablePlugin(resolve_options(options, **overrides))
    plugin.install(md)
    return plugin
