"""Unit tests for plugin options and their validation."""

import pytest

from frontmatter_table.exceptions import FrontmatterTableError, InvalidOptionsError, ValidationError
from frontmatter_table.options import FrontmatterTableOptions, marker_lines, resolve_options


@pytest.mark.unit
class TestDefaults:
    """Test default option values."""

    def test_defaults(self, default_options):
        """Defaults match the documented delimiters."""
        assert default_options.name == "yaml-frontmatter"
        assert default_options.start_marker == "---\n#yaml"
        assert default_options.start_marker_vertical == "---\n#yaml-v"
        assert default_options.end_marker == "---"
        assert default_options.allow_anywhere is True
        assert default_options.class_name is None
        assert default_options.render is None
        assert default_options.decoder is None

    def test_frozen(self, default_options):
        """Options cannot be mutated in place."""
        with pytest.raises(AttributeError):
            default_options.class_name = "x"  # type: ignore[misc]

    def test_create_updated(self, default_options):
        """create_updated returns a modified copy."""
        updated = default_options.create_updated(class_name="meta")

        assert updated.class_name == "meta"
        assert default_options.class_name is None


@pytest.mark.unit
class TestValidation:
    """Test __post_init__ validation."""

    @pytest.mark.parametrize("field_name", ["name", "start_marker", "start_marker_vertical", "end_marker"])
    def test_blank_values_rejected(self, field_name):
        """Blank markers and names are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            FrontmatterTableOptions(**{field_name: "  "})

        assert exc_info.value.parameter_name == field_name

    def test_identical_start_markers_rejected(self):
        """Plain and vertical start markers must differ after trimming."""
        with pytest.raises(InvalidOptionsError, match="must differ"):
            FrontmatterTableOptions(start_marker="---\n#t", start_marker_vertical=" --- \n#t ")

    def test_attribute_value_requires_name(self):
        """An attribute value without a name is rejected."""
        with pytest.raises(InvalidOptionsError):
            FrontmatterTableOptions(table_attribute_value="x")

    def test_render_must_be_callable(self):
        """A non-callable render function is rejected."""
        with pytest.raises(InvalidOptionsError):
            FrontmatterTableOptions(render="not callable")  # type: ignore[arg-type]

    def test_error_hierarchy(self):
        """Option errors are validation errors of the library."""
        with pytest.raises(ValidationError):
            FrontmatterTableOptions(end_marker="")
        with pytest.raises(FrontmatterTableError):
            FrontmatterTableOptions(end_marker="")


@pytest.mark.unit
class TestTableAttributes:
    """Test table_attributes()."""

    def test_none_configured(self, default_options):
        """No attributes by default."""
        assert default_options.table_attributes() == []

    def test_class_then_extra(self):
        """The class comes first, then the extra attribute."""
        options = FrontmatterTableOptions(class_name="meta", table_attribute_name="data-x", table_attribute_value="1")

        assert options.table_attributes() == [("class", "meta"), ("data-x", "1")]

    def test_extra_attribute_without_value(self):
        """An attribute name alone renders with an empty value."""
        options = FrontmatterTableOptions(table_attribute_name="hidden")

        assert options.table_attributes() == [("hidden", "")]


@pytest.mark.unit
class TestResolveOptions:
    """Test resolve_options()."""

    def test_defaults_when_none(self):
        """None resolves to default options."""
        assert resolve_options() == FrontmatterTableOptions()

    def test_overrides_applied(self, default_options):
        """Keyword overrides replace fields."""
        assert resolve_options(default_options, allow_anywhere=False).allow_anywhere is False

    def test_wrong_type_rejected(self):
        """Anything but FrontmatterTableOptions is rejected."""
        with pytest.raises(InvalidOptionsError, match="FrontmatterTableOptions"):
            resolve_options({"class_name": "x"})  # type: ignore[arg-type]

    def test_unknown_override_rejected(self):
        """Unknown option names are rejected."""
        with pytest.raises(InvalidOptionsError, match="Unknown option"):
            resolve_options(None, colour="red")


def test_marker_lines():
    """Markers split on newlines and each line is trimmed."""
    assert marker_lines(" --- \n #yaml ") == ["---", "#yaml"]
