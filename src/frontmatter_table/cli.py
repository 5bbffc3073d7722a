#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for frontmatter_table.

Render a Markdown document whose YAML front matter blocks become HTML tables,
list the token stream, or dump the decoded blocks as JSON.

Examples
--------
Render to stdout:
    $ frontmatter-table README.md

Write to a file with a CSS class on every front matter table:
    $ frontmatter-table notes.md --class-name meta --out notes.html

Only accept a block on the first line:
    $ frontmatter-table notes.md --first-only

Inspect the decoded blocks:
    $ cat notes.md | frontmatter-table - --format json
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional

from frontmatter_table import __version__
from frontmatter_table.api import create_markdown, iter_blocks
from frontmatter_table.constants import DEFAULT_OUTPUT_FORMAT
from frontmatter_table.exceptions import FrontmatterTableError, ValidationError
from frontmatter_table.logging_utils import configure_logging
from frontmatter_table.options import FrontmatterTableOptions
from frontmatter_table.values import coerce_text, is_list, is_record


def parse_attribute(value: str) -> tuple[str, str]:
    """Parse ``NAME=VALUE`` for argparse."""
    name, sep, attr_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {value!r}")
    return name.strip(), attr_value


def unescape_marker(value: str) -> str:
    r"""Allow multi-line markers on the command line, written with a literal ``\n``."""
    return value.replace("\\n", "\n")


_OPTION_FIELDS = {option.name: option for option in fields(FrontmatterTableOptions)}


def option_help(field_name: str) -> str:
    """Return the help text declared on a ``FrontmatterTableOptions`` field."""
    return _OPTION_FIELDS[field_name].metadata.get("help", f"Configure {field_name}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="frontmatter-table",
        description="Render YAML front matter blocks in Markdown as HTML tables.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to read, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", type=str, help="Write output to this file instead of stdout")
    parser.add_argument(
        "--format",
        choices=["html", "tokens", "json"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output rendered HTML, the token stream, or decoded blocks as JSON (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"frontmatter-table {__version__}")

    markers = parser.add_argument_group("delimiters")
    markers.add_argument("--start-marker", type=unescape_marker, help=option_help("start_marker"))
    markers.add_argument("--start-marker-vertical", type=unescape_marker, help=option_help("start_marker_vertical"))
    markers.add_argument("--end-marker", type=unescape_marker, help=option_help("end_marker"))
    markers.add_argument(
        "--first-only",
        action="store_true",
        help="Only recognize a block starting on the first line of the document",
    )

    table = parser.add_argument_group("table attributes")
    table.add_argument("--class-name", type=str, help=option_help("class_name"))
    table.add_argument(
        "--table-attribute",
        type=parse_attribute,
        metavar="NAME=VALUE",
        help="Extra attribute for front matter tables",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    logging_group.add_argument("--log-file", type=str, help="Also write log output to this file")
    logging_group.add_argument("--trace", action="store_true", help="Timestamped log format with logger names")

    return parser


def build_options(args: argparse.Namespace) -> FrontmatterTableOptions:
    """Map parsed arguments to plugin options."""
    kwargs: dict[str, Any] = {}
    if args.start_marker is not None:
        kwargs["start_marker"] = args.start_marker
    if args.start_marker_vertical is not None:
        kwargs["start_marker_vertical"] = args.start_marker_vertical
    if args.end_marker is not None:
        kwargs["end_marker"] = args.end_marker
    if args.first_only:
        kwargs["allow_anywhere"] = False
    if args.class_name:
        kwargs["class_name"] = args.class_name
    if args.table_attribute:
        kwargs["table_attribute_name"], kwargs["table_attribute_value"] = args.table_attribute
    return FrontmatterTableOptions(**kwargs)


def read_input(source: str) -> str:
    """Read the document from a path or stdin."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FrontmatterTableError(f"Cannot read {source}: {e}", original_error=e) from e


def format_tokens(text: str, options: FrontmatterTableOptions) -> str:
    """List block-level tokens, one per line, indented by nesting depth."""
    md = create_markdown(options)
    lines = []
    depth = 0
    for token in md.parse(text):
        if token.nesting == -1:
            depth -= 1
        line = f"{'  ' * depth}{token.type}"
        if token.tag:
            line += f" <{token.tag}>"
        if token.type == "inline":
            line += f" {token.content!r}"
        lines.append(line)
        if token.nesting == 1:
            depth += 1
    return "\n".join(lines) + "\n"


_JSON_SCALARS = (str, int, float, bool)


def json_ready(value: Any, active: Optional[set[int]] = None) -> Any:
    """Convert decoded data to something ``json.dumps`` accepts.

    Keys and values JSON cannot represent, such as dates, become cell text.
    A container reached again inside itself becomes its flow YAML text.
    """
    if value is None or isinstance(value, _JSON_SCALARS):
        return value
    if not (is_record(value) or is_list(value)):
        return coerce_text(value)

    if active is None:
        active = set()
    if id(value) in active:
        return coerce_text(value)

    active.add(id(value))
    try:
        if is_record(value):
            return {_json_key(key): json_ready(item, active) for key, item in value.items()}
        return [json_ready(item, active) for item in value]
    finally:
        active.discard(id(value))


def _json_key(key: Any) -> Any:
    if key is None or isinstance(key, _JSON_SCALARS):
        return key
    return coerce_text(key)


def format_json(text: str, options: FrontmatterTableOptions) -> str:
    """Dump decoded blocks as a JSON array."""
    blocks = [
        {
            "start_line": block.start_line,
            "end_line": block.end_line,
            "vertical": block.vertical,
            "data": json_ready(block.data),
        }
        for block in iter_blocks(text, options)
    ]
    return json.dumps(blocks, indent=2, ensure_ascii=False) + "\n"


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = build_options(parsed_args)
        text = read_input(parsed_args.input)

        if parsed_args.format == "json":
            output = format_json(text, options)
        elif parsed_args.format == "tokens":
            output = format_tokens(text, options)
        else:
            output = create_markdown(options).render(text)
    except ValidationError as e:
        print(f"Invalid options: {e.message}", file=sys.stderr)
        return 1
    except FrontmatterTableError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
