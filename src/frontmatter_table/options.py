#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/options.py
"""Configuration options for the front matter table plugin.

Options are immutable frozen dataclasses. Use ``create_updated`` to derive a
modified copy rather than mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from frontmatter_table.constants import (
    DEFAULT_ALLOW_ANYWHERE,
    DEFAULT_END_MARKER,
    DEFAULT_PLUGIN_NAME,
    DEFAULT_START_MARKER,
    DEFAULT_START_MARKER_VERTICAL,
)
from frontmatter_table.exceptions import InvalidOptionsError

# (tokens, idx, options, env) as passed to a bound markdown-it render rule,
# with the renderer itself first
RenderFunction = Callable[..., str]
DecoderFunction = Callable[[str], Any]


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class FrontmatterTableOptions(CloneFrozenMixin):
    """Configuration for recognizing and rendering front matter tables.

    Parameters
    ----------
    name : str, default = "yaml-frontmatter"
        Prefix for every token type the plugin emits, and the name of the
        block rule registered with the host parser.
    start_marker : str, default = "---\\n#yaml"
        Delimiter opening a horizontally laid out table (one column per key).
        May span several lines; each line is compared after trimming.
    start_marker_vertical : str, default = "---\\n#yaml-v"
        Delimiter opening a vertically laid out table (one row per key).
    end_marker : str, default = "---"
        Delimiter closing a block.
    allow_anywhere : bool, default = True
        If False, only a block starting on the first document line at zero
        indentation is recognized.
    class_name : str or None, default = None
        Value for the ``class`` attribute of the outermost table.
    table_attribute_name : str or None, default = None
        Name of one extra attribute for the outermost table.
    table_attribute_value : str or None, default = None
        Value of the extra attribute.
    render : callable or None, default = None
        Replacement for the default render rule. Installed for every node kind
        the plugin produces and called as ``render(renderer, tokens, idx,
        options, env)``.
    decoder : callable or None, default = None
        Function turning the block text into data. Defaults to
        ``yaml.safe_load``. Any exception it raises rejects the block.

    Examples
    --------
    Add a CSS class and a data attribute:

        >>> options = FrontmatterTableOptions(class_name="meta", table_attribute_name="data-kind",
        ...                                   table_attribute_value="front")

    """

    name: str = field(
        default=DEFAULT_PLUGIN_NAME,
        metadata={"help": "Token type prefix and block rule name"},
    )
    start_marker: str = field(
        default=DEFAULT_START_MARKER,
        metadata={"help": "Start delimiter for horizontal tables"},
    )
    start_marker_vertical: str = field(
        default=DEFAULT_START_MARKER_VERTICAL,
        metadata={"help": "Start delimiter for vertical tables"},
    )
    end_marker: str = field(
        default=DEFAULT_END_MARKER,
        metadata={"help": "End delimiter"},
    )
    allow_anywhere: bool = field(
        default=DEFAULT_ALLOW_ANYWHERE,
        metadata={"help": "Recognize blocks anywhere, not only at document start"},
    )
    class_name: Optional[str] = field(
        default=None,
        metadata={"help": "CSS class for the outermost table"},
    )
    table_attribute_name: Optional[str] = field(
        default=None,
        metadata={"help": "Extra attribute name for the outermost table"},
    )
    table_attribute_value: Optional[str] = field(
        default=None,
        metadata={"help": "Extra attribute value for the outermost table"},
    )
    render: Optional[RenderFunction] = field(
        default=None,
        metadata={"help": "Custom render function replacing the default"},
    )
    decoder: Optional[DecoderFunction] = field(
        default=None,
        metadata={"help": "Custom decoder replacing yaml.safe_load"},
    )

    def __post_init__(self) -> None:
        """Validate delimiter and attribute settings.

        Raises
        ------
        InvalidOptionsError
            If a marker or the name is blank, the vertical and plain start
            markers are identical, or an attribute value has no name.

        """
        for field_name in ("name", "start_marker", "start_marker_vertical", "end_marker"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidOptionsError(
                    f"{field_name} must be a non-empty string, got {value!r}",
                    parameter_name=field_name,
                    parameter_value=value,
                )

        if marker_lines(self.start_marker) == marker_lines(self.start_marker_vertical):
            raise InvalidOptionsError(
                "start_marker and start_marker_vertical must differ",
                parameter_name="start_marker_vertical",
                parameter_value=self.start_marker_vertical,
            )

        if self.table_attribute_value is not None and not self.table_attribute_name:
            raise InvalidOptionsError(
                "table_attribute_value requires table_attribute_name",
                parameter_name="table_attribute_name",
                parameter_value=self.table_attribute_name,
            )

        if self.render is not None and not callable(self.render):
            raise InvalidOptionsError("render must be callable", parameter_name="render", parameter_value=self.render)
        if self.decoder is not None and not callable(self.decoder):
            raise InvalidOptionsError("decoder must be callable", parameter_name="decoder", parameter_value=self.decoder)

    def table_attributes(self) -> list[tuple[str, str]]:
        """Return the attributes configured for the outermost table, in order."""
        attrs: list[tuple[str, str]] = []
        if self.class_name:
            attrs.append(("class", self.class_name))
        if self.table_attribute_name:
            value = self.table_attribute_value
            attrs.append((self.table_attribute_name, "" if value is None else str(value)))
        return attrs


def marker_lines(marker: str) -> list[str]:
    """Split a delimiter into its trimmed lines."""
    return [line.strip() for line in marker.split("\n")]


def resolve_options(options: FrontmatterTableOptions | None = None, **overrides: Any) -> FrontmatterTableOptions:
    """Return a validated options instance built from ``options`` and keyword overrides.

    Parameters
    ----------
    options : FrontmatterTableOptions or None
        Base options. Defaults are used if None.
    **overrides : Any
        Field values replacing those of ``options``.

    Returns
    -------
    FrontmatterTableOptions
        The resolved options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a FrontmatterTableOptions or an override is unknown.

    """
    if options is not None and not isinstance(options, FrontmatterTableOptions):
        raise InvalidOptionsError(
            f"expected options of type 'FrontmatterTableOptions' but received '{type(options).__name__}'",
            parameter_name="options",
            parameter_value=type(options),
        )

    base = options or FrontmatterTableOptions()
    if not overrides:
        return base

    try:
        return base.create_updated(**overrides)
    except TypeError as e:
        raise InvalidOptionsError(f"Unknown option: {e}", parameter_name="options", original_error=e) from e
