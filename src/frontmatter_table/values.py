#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/values.py
"""Shape classification and text coercion for decoded values.

Decoded front matter is dynamically shaped. ``classify`` maps any value to one
of a fixed set of shapes, and never raises; the table builder dispatches on
the result. ``coerce_text`` turns anything that is not laid out as a table into
the text of a single cell.
"""

from __future__ import annotations

import datetime
import enum
from collections.abc import Mapping
from typing import Any, Optional

import yaml

from frontmatter_table.constants import FALSE_TEXT, MISSING_TEXT, NULL_TEXT, TRUE_TEXT


class _Missing:
    """Placeholder for a record field absent from a row."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class ValueShape(enum.Enum):
    """Structural shape of a decoded value."""

    SCALAR = "scalar"
    RECORD = "record"
    PRIMITIVE_LIST = "primitive_list"
    RECORD_LIST = "record_list"
    EMPTY_LIST = "empty_list"
    OTHER_LIST = "other_list"


def is_record(value: Any) -> bool:
    """Return True if ``value`` is a keyed mapping."""
    return isinstance(value, Mapping)


def is_list(value: Any) -> bool:
    """Return True if ``value`` is a sequence laid out as a nested table."""
    return isinstance(value, (list, tuple))


def is_scalar(value: Any) -> bool:
    """Return True if ``value`` is neither a list nor a record.

    ``None`` counts as a scalar.
    """
    return not is_list(value) and not is_record(value)


def classify(value: Any) -> ValueShape:
    """Classify a decoded value.

    Parameters
    ----------
    value : Any
        Any decoded value

    Returns
    -------
    ValueShape
        ``PRIMITIVE_LIST`` and ``RECORD_LIST`` are non-empty and uniform;
        lists mixing records, scalars or lists are ``OTHER_LIST``

    Examples
    --------
        >>> classify(["a", 1, None])
        <ValueShape.PRIMITIVE_LIST: 'primitive_list'>
        >>> classify([{"a": 1}, "b"])
        <ValueShape.OTHER_LIST: 'other_list'>

    """
    if is_record(value):
        return ValueShape.RECORD
    if not is_list(value):
        return ValueShape.SCALAR
    if len(value) == 0:
        return ValueShape.EMPTY_LIST
    if all(is_scalar(item) for item in value):
        return ValueShape.PRIMITIVE_LIST
    if all(is_record(item) for item in value):
        return ValueShape.RECORD_LIST
    return ValueShape.OTHER_LIST


def coerce_text(value: Any) -> str:
    """Convert a value to the text of a single table cell.

    Parameters
    ----------
    value : Any
        Scalar, ``MISSING``, or a composite value not laid out as a table

    Returns
    -------
    str
        Strings unchanged, ``null``/``true``/``false`` for None and booleans,
        ISO 8601 for dates, and a one-line YAML flow dump for composites

    """
    if value is MISSING:
        return MISSING_TEXT
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return TRUE_TEXT if value else FALSE_TEXT
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if is_record(value) or is_list(value):
        return _flow_dump(value)
    return str(value)


def _flow_dump(value: Any) -> str:
    try:
        dumped = yaml.safe_dump(_plain(value), default_flow_style=True, allow_unicode=True, sort_keys=False, width=2**31 - 1)
    except yaml.YAMLError:
        return str(value)
    return dumped.strip()


def _plain(value: Any, active: Optional[dict[int, Any]] = None) -> Any:
    """Convert mappings and tuples to the builtin types safe_dump accepts.

    A container reached again inside itself maps to its own converted
    object, so the cycle survives and is dumped as an anchor and alias.
    Containers that are merely shared are converted separately.
    """
    if not (is_record(value) or is_list(value)):
        return value
    if active is None:
        active = {}
    if id(value) in active:
        return active[id(value)]

    if is_record(value):
        mapping: dict[Any, Any] = {}
        active[id(value)] = mapping
        for key, item in value.items():
            mapping[key] = _plain(item, active)
        del active[id(value)]
        return mapping

    items: list[Any] = []
    active[id(value)] = items
    items.extend(_plain(item, active) for item in value)
    del active[id(value)]
    return items
