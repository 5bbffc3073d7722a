#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/constants.py
"""Constants and type aliases shared across frontmatter_table.

This module centralizes the default delimiter texts, the token-type prefix and
the fixed node-kind vocabulary emitted by the table builder.

Organization
------------
1. Delimiter Defaults - Start/end marker texts
2. Node Vocabulary - Node kinds and their HTML tags
3. Rendering - Layout literals and text coercion sentinels
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Delimiter Defaults
# =============================================================================

DEFAULT_PLUGIN_NAME = "yaml-frontmatter"

# Multi-line markers are compared line by line, each line trimmed
DEFAULT_START_MARKER = "---\n#yaml"
DEFAULT_START_MARKER_VERTICAL = "---\n#yaml-v"
DEFAULT_END_MARKER = "---"

DEFAULT_ALLOW_ANYWHERE = True

# =============================================================================
# Node Vocabulary
# =============================================================================

LayoutType = Literal["horizontal", "vertical"]

NodeKind = Literal[
    "open",
    "close",
    "thead_open",
    "thead_close",
    "tbody_open",
    "tbody_close",
    "tr_open",
    "tr_close",
    "th_open",
    "th_close",
    "td_open",
    "td_close",
    "nested_open",
    "nested_close",
    "inline",
]

# Every structural kind gets a renderer; "inline" leaves are rendered by the host
RENDERED_NODE_KINDS: tuple[str, ...] = (
    "open",
    "close",
    "thead_open",
    "thead_close",
    "tbody_open",
    "tbody_close",
    "tr_open",
    "tr_close",
    "th_open",
    "th_close",
    "td_open",
    "td_close",
    "nested_open",
    "nested_close",
)

# Host rules the block rule may interrupt
TERMINATES_RULES: tuple[str, ...] = ("paragraph", "reference", "blockquote", "list")

# Generic host rule the block rule is inserted ahead of
INSERT_BEFORE_RULE = "fence"

# =============================================================================
# Rendering
# =============================================================================

NULL_TEXT = "null"
TRUE_TEXT = "true"
FALSE_TEXT = "false"

# Text used for a record-list cell whose row lacks the header key
MISSING_TEXT = "undefined"

OutputFormat = Literal["html", "tokens", "json"]
DEFAULT_OUTPUT_FORMAT: OutputFormat = "html"
