"""Unit tests for block content decoding."""

import json

import pytest

from frontmatter_table.buffers import TextBuffer
from frontmatter_table.decoder import decode_block, decode_content
from frontmatter_table.exceptions import DecodeError, ParsingError


@pytest.mark.unit
class TestDecodeContent:
    """Test decode_content()."""

    def test_mapping_preserves_key_order(self):
        """Keys come back in document order."""
        data = decode_content("zeta: 1\nalpha: 2\nmid: [x, y]")

        assert list(data) == ["zeta", "alpha", "mid"]
        assert data["mid"] == ["x", "y"]

    @pytest.mark.parametrize("text", ["", "   \n\n", "# only a comment", "~", "null"])
    def test_empty_content_rejected(self, text):
        """Empty or null content is rejected."""
        with pytest.raises(DecodeError, match="empty"):
            decode_content(text)

    def test_empty_mapping_rejected(self):
        """A mapping with no keys is rejected."""
        with pytest.raises(DecodeError, match="no keys"):
            decode_content("{}")

    @pytest.mark.parametrize("text", ["- a\n- b", "just a string", "42"])
    def test_non_mapping_rejected(self, text):
        """Top-level lists and scalars are rejected."""
        with pytest.raises(DecodeError, match="not a mapping"):
            decode_content(text)

    def test_malformed_yaml_rejected(self):
        """Decoder exceptions become DecodeError with the original attached."""
        with pytest.raises(DecodeError) as exc_info:
            decode_content("key: [unclosed")

        assert exc_info.value.original_error is not None
        assert exc_info.value.content == "key: [unclosed"
        assert isinstance(exc_info.value, ParsingError)

    def test_custom_decoder(self):
        """An injected decoder replaces YAML."""
        data = decode_content('{"a": 1}', decoder=json.loads)

        assert data == {"a": 1}

    def test_custom_decoder_exception_rejected(self):
        """Any exception from a custom decoder rejects the block."""

        def broken(text):
            raise RuntimeError("boom")

        with pytest.raises(DecodeError, match="boom"):
            decode_content("a: 1", decoder=broken)


@pytest.mark.unit
class TestDecodeBlock:
    """Test decode_block() over a line buffer."""

    def test_inclusive_line_range(self):
        """Both bounds are inclusive and blank lines are kept."""
        buffer = TextBuffer("---\n#yaml\na: 1\n\nb:\n  - x\n\n  - y\n---")
        data = decode_block(buffer, 2, 7)

        assert data == {"a": 1, "b": ["x", "y"]}

    def test_empty_range_rejected(self):
        """A block with nothing between the delimiters is rejected."""
        buffer = TextBuffer("---\n#yaml\n---")

        with pytest.raises(DecodeError):
            decode_block(buffer, 2, 1)
