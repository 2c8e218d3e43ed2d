"""Tests for the template parser."""

from pydantic import ValidationError
import pytest

from nestfmt.core.errors import MissingFormatDelimiterError
from nestfmt.core.errors import TemplateSyntaxError
from nestfmt.core.errors import UnterminatedFieldError
from nestfmt.template import Field
from nestfmt.template import Format
from nestfmt.template import parse


class TestParseStructure:
    """Test the shape of parsed Format trees."""

    def test_static_and_field(self) -> None:
        """Test one static field followed by one dynamic field."""
        fmt = parse("Hello {name}")
        assert fmt == Format((Field(options="Hello "), Field(name="name")))

    def test_field_with_options(self) -> None:
        """Test options are captured verbatim."""
        fmt = parse("Hello {name:30U}")
        assert fmt[1] == Field(name="name", options="30U")

    def test_field_with_subformat(self) -> None:
        """Test a field with empty options and one subformat."""
        fmt = parse("{vec::{x:+4}}")
        assert len(fmt) == 1
        field = fmt[0]
        assert field.name == "vec"
        assert field.options == ""
        assert field.subformats == (Format((Field(name="x", options="+4"),)),)

    def test_escaped_colon_in_options(self) -> None:
        """Test '~:' yields a literal colon inside options."""
        fmt = parse("{mac:17x,2~:}")
        assert fmt[0] == Field(name="mac", options="17x,2:")

    def test_empty_template(self) -> None:
        """Test the empty template parses to an empty Format."""
        fmt = parse("")
        assert len(fmt) == 0
        assert list(fmt) == []

    def test_adjacent_fields(self) -> None:
        """Test two fields with no static text between them."""
        fmt = parse("{a}{b}")
        assert [f.name for f in fmt] == ["a", "b"]

    def test_colon_is_literal_in_static_text(self) -> None:
        """Test ':' outside a field is plain text."""
        fmt = parse("a: {b}")
        assert fmt[0] == Field(options="a: ")

    def test_colon_is_literal_in_subformat_text(self) -> None:
        """Test ':' in subformat static text does not start another subformat."""
        fmt = parse("{p::x: {*1}}")
        field = fmt[0]
        assert len(field.subformats) == 1
        assert field.subformats[0][0] == Field(options="x: ")
        assert field.subformats[0][1] == Field(name="*1")

    def test_nested_subformats(self) -> None:
        """Test a subformat whose field has its own subformat."""
        fmt = parse("{m:, :{*::{*1} -> {*2}}}")
        outer = fmt[0]
        assert outer.options == ", "
        inner = outer.subformats[0][0]
        assert inner.name == "*"
        assert inner.options == ""
        assert [f.name for f in inner.subformats[0]] == ["*1", "", "*2"]
        assert inner.subformats[0][1].options == " -> "

    def test_arbitrary_nesting_depth(self) -> None:
        """Test deeply nested templates parse to the matching depth."""
        depth = 60
        template = "{*}"
        for _ in range(depth):
            template = "{s::" + template + "}"

        field = parse(template)[0]
        levels = 0
        while field.subformats:
            field = field.subformats[0][0]
            levels += 1
        assert levels == depth
        assert field.name == "*"


class TestEscaping:
    """Test the '~' escape rule."""

    def test_escaped_braces(self) -> None:
        """Test '~{' and '~}' are literal braces."""
        fmt = parse("a~{b~}c")
        assert fmt == Format((Field(options="a{b}c"),))

    def test_escaped_tilde(self) -> None:
        """Test '~~' is a literal tilde."""
        assert parse("x~~y")[0].options == "x~y"

    def test_trailing_tilde_is_literal(self) -> None:
        """Test a lone '~' at the end of input is kept."""
        assert parse("a~")[0].options == "a~"

    def test_escape_in_name(self) -> None:
        """Test escapes inside a field name."""
        assert parse("{a~}b}")[0].name == "a}b"

    def test_escape_of_plain_character(self) -> None:
        """Test '~' before an ordinary character yields that character."""
        assert parse("~a~b")[0].options == "ab"


class TestStaticCoalescing:
    """Test that static runs never produce consecutive static fields."""

    def test_empty_name_field_merges_into_static(self) -> None:
        """Test '{:text}' contributes literal text to the static run."""
        fmt = parse("a{:b}c")
        assert fmt == Format((Field(options="abc"),))

    def test_empty_field_is_dropped(self) -> None:
        """Test '{}' contributes nothing."""
        fmt = parse("a{}b{x}")
        assert fmt == Format((Field(options="ab"), Field(name="x")))

    def test_no_consecutive_static_fields(self) -> None:
        """Test static fields always alternate with dynamic ones."""
        fmt = parse("x~{{:y}~}{a}z{:w}")
        kinds = [f.is_static for f in fmt]
        assert kinds == [True, False, True]
        assert fmt[0].options == "x{y}"
        assert fmt[2].options == "zw"


class TestParseErrors:
    """Test syntax errors raised by the parser."""

    def test_unterminated_field(self) -> None:
        """Test a field missing its closing brace."""
        with pytest.raises(UnterminatedFieldError) as exc_info:
            parse("Hello {name")
        assert exc_info.value.position == len("Hello {name")

    def test_unterminated_options(self) -> None:
        """Test a field that ends inside its options."""
        with pytest.raises(UnterminatedFieldError):
            parse("{n:04")

    def test_escaped_close_does_not_terminate(self) -> None:
        """Test '~}' cannot close a field."""
        with pytest.raises(UnterminatedFieldError):
            parse("{n~}")

    def test_subformat_without_delimiter(self) -> None:
        """Test a subformat that is not followed by '}'."""
        with pytest.raises(MissingFormatDelimiterError):
            parse("{v::{*}")

    def test_unmatched_close_brace(self) -> None:
        """Test a stray '}' at top level."""
        with pytest.raises(MissingFormatDelimiterError) as exc_info:
            parse("a}b")
        assert exc_info.value.position == 1

    def test_errors_share_base_class(self) -> None:
        """Test syntax errors are ValueErrors with a common base."""
        with pytest.raises(TemplateSyntaxError):
            parse("{")
        with pytest.raises(ValueError, match="position"):
            parse("}")

    def test_non_string_template(self) -> None:
        """Test error on non-string template."""
        with pytest.raises(TypeError, match="must be str"):
            parse(123)  # type: ignore[arg-type]

    def test_nesting_beyond_recursion_limit(self) -> None:
        """Test excessive nesting raises a syntax error, not RecursionError."""
        depth = 20_000
        template = "{s::" * depth + "{*}" + "}" * depth
        with pytest.raises(TemplateSyntaxError, match="nested too deeply"):
            parse(template)


class TestImmutability:
    """Test parsed trees cannot be modified."""

    def test_field_is_frozen(self) -> None:
        """Test assigning to a field attribute fails."""
        field = parse("{a}")[0]
        with pytest.raises(ValidationError):
            field.name = "b"  # type: ignore[misc]

    def test_format_is_hashable(self) -> None:
        """Test equal templates produce equal, hashable Formats."""
        assert hash(parse("{a:1::{*}}")) == hash(parse("{a:1::{*}}"))
        assert parse("{a}") != parse("{b}")
