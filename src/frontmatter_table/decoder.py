#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/frontmatter_table/decoder.py
"""Decode the text between a block's delimiters.

A block that fails to decode, or decodes to nothing usable, is indistinguishable
from text that merely looks like a delimiter. Every such case raises
``DecodeError`` so callers can fall back to ordinary parsing.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import yaml

from frontmatter_table.buffers import LineBuffer
from frontmatter_table.exceptions import DecodeError
from frontmatter_table.options import DecoderFunction
from frontmatter_table.values import is_record

logger = logging.getLogger(__name__)


def default_decoder(text: str) -> Any:
    """Decode YAML text with ``yaml.safe_load``."""
    return yaml.safe_load(text)


def decode_content(text: str, decoder: Optional[DecoderFunction] = None) -> dict[Any, Any]:
    """Decode block text into a non-empty mapping.

    Parameters
    ----------
    text : str
        Text strictly between the delimiters
    decoder : callable, optional
        Decoder to use instead of ``yaml.safe_load``

    Returns
    -------
    dict
        The decoded mapping, keys in document order

    Raises
    ------
    DecodeError
        If the decoder raises, or the result is empty or not a mapping

    """
    decode = decoder or default_decoder
    try:
        data = decode(text)
    except Exception as e:
        raise DecodeError("content could not be decoded", content=text, original_error=e) from e

    if data is None:
        raise DecodeError("content is empty", content=text)
    if not is_record(data):
        raise DecodeError(f"top-level value is a {type(data).__name__}, not a mapping", content=text)
    if len(data) == 0:
        raise DecodeError("mapping has no keys", content=text)

    return dict(data)


def decode_block(
    buffer: LineBuffer,
    first_line: int,
    last_line: int,
    decoder: Optional[DecoderFunction] = None,
) -> dict[Any, Any]:
    """Decode lines ``first_line`` through ``last_line`` inclusive.

    An empty range (``last_line < first_line``) decodes the empty string.

    Raises
    ------
    DecodeError
        As for ``decode_content``

    """
    text = buffer.get_text(first_line, last_line + 1)
    data = decode_content(text, decoder)
    logger.debug("Decoded %d keys from lines %d-%d", len(data), first_line, last_line)
    return data
