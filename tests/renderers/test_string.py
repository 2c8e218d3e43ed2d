"""Tests for the string renderer."""

import pytest

from nestfmt.core.errors import InvalidFormatSpecError
from nestfmt.renderers.enums import Align
from nestfmt.renderers.enums import CaseConversion
from nestfmt.renderers.enums import StripMode
from nestfmt.renderers.string import parse_picture_options
from nestfmt.renderers.string import parse_string_options
from nestfmt.renderers.string import render_str
from nestfmt.template import Field


def fmt_str(value: str, options: str = "") -> str:
    """Render value the way a '{s:options}' field would."""
    return render_str(value, Field(name="s", options=options))


class TestStringOptions:
    """Test parsing of general-mode option strings."""

    def test_full_option_string(self) -> None:
        """Test every option in grammar order."""
        spec = parse_string_options(">12=.>!UsL/C")
        assert spec.align is Align.RIGHT
        assert spec.width == 12
        assert spec.filler == "."
        assert spec.overflow == "!"
        assert spec.case is CaseConversion.UPPER
        assert spec.strip is StripMode.LEFT
        assert spec.escape == "C"

    def test_bare_strip_is_both_sides(self) -> None:
        """Test 's' without a side strips both."""
        assert parse_string_options("s").strip is StripMode.BOTH

    def test_trailing_characters(self) -> None:
        """Test unconsumed characters are rejected."""
        with pytest.raises(InvalidFormatSpecError, match="string options"):
            parse_string_options("x")
        with pytest.raises(InvalidFormatSpecError):
            parse_string_options("5Uq")

    def test_unknown_escape_is_rejected(self) -> None:
        """Test only '/C' is accepted after '/'."""
        with pytest.raises(InvalidFormatSpecError):
            parse_string_options("/X")

    def test_picture_options(self) -> None:
        """Test placeholder and filler overrides."""
        spec = parse_picture_options("@=?<_??-??")
        assert spec.placeholder == "?"
        assert spec.filler == "_"
        assert spec.pattern == "??-??"


class TestGeneralFormat:
    """Test general-mode string formatting."""

    def test_no_options(self) -> None:
        """Test the value is returned unchanged."""
        assert fmt_str("hello") == "hello"
        assert fmt_str("") == ""

    def test_truncate(self) -> None:
        """Test values longer than the width are truncated."""
        assert fmt_str("hello world", "5") == "hello"

    def test_overflow(self) -> None:
        """Test overflow char replaces values longer than the width."""
        assert fmt_str("hello world", "5>*") == "*****"
        assert fmt_str("hello", "5>*") == "hello"

    def test_overflow_ignores_case_conversion(self) -> None:
        """Test the overflow marker is emitted as given."""
        assert fmt_str("hello world", "5>xU") == "xxxxx"

    def test_left_align_default(self) -> None:
        """Test padding on the right by default."""
        assert fmt_str("abc", "6") == "abc   "
        assert fmt_str("abc", "<6") == "abc   "

    def test_right_align(self) -> None:
        """Test padding on the left."""
        assert fmt_str("abc", ">6") == "   abc"

    def test_center_align(self) -> None:
        """Test centering puts the extra filler on the left."""
        assert fmt_str("abc", "=6") == "  abc "
        assert fmt_str("ab", "=6") == "  ab  "

    def test_filler(self) -> None:
        """Test an explicit filler character."""
        assert fmt_str("abc", "6=.") == "abc..."
        assert fmt_str("abc", ">6=0") == "000abc"

    def test_case_conversion(self) -> None:
        """Test upper and lower case conversion."""
        assert fmt_str("Mixed", "U") == "MIXED"
        assert fmt_str("Mixed", "l") == "mixed"

    def test_case_applies_after_padding(self) -> None:
        """Test case conversion also applies to the filler."""
        assert fmt_str("abc", "6=xU") == "ABCXXX"

    def test_strip(self) -> None:
        """Test stripping spaces from either or both sides."""
        assert fmt_str("  abc  ", "s") == "abc"
        assert fmt_str("  abc  ", "sL") == "abc  "
        assert fmt_str("  abc  ", "sR") == "  abc"

    def test_strip_only_spaces(self) -> None:
        """Test other whitespace is kept."""
        assert fmt_str("\t abc \n", "s") == "\t abc \n"

    def test_strip_before_width(self) -> None:
        """Test stripping happens before padding and truncation."""
        assert fmt_str("   abc", "5s") == "abc  "
        assert fmt_str("  abcdef  ", "3>#s") == "###"

    def test_escape_flag_is_inert(self) -> None:
        """Test '/C' is accepted and does not change the output."""
        assert fmt_str('say "hi"\n', "/C") == 'say "hi"\n'


class TestPictureFormat:
    """Test picture-mode string formatting."""

    def test_phone_number(self) -> None:
        """Test placeholders consume characters and filler pads the rest."""
        assert fmt_str("5551234", "@(###) ###-####") == "(555) 123-4   "

    def test_exact_fit(self) -> None:
        """Test a value that fills every placeholder."""
        assert fmt_str("5551234567", "@(###) ###-####") == "(555) 123-4567"

    def test_extra_input_is_dropped(self) -> None:
        """Test characters beyond the placeholders are ignored."""
        assert fmt_str("abcdef", "@##") == "ab"

    def test_custom_placeholder_and_filler(self) -> None:
        """Test '=' and '<' overrides."""
        assert fmt_str("ab", "@=?<_??-??") == "ab-__"

    def test_empty_pattern(self) -> None:
        """Test '@' alone renders nothing."""
        assert fmt_str("abc", "@") == ""

    def test_literal_hash_with_other_placeholder(self) -> None:
        """Test '#' is literal when another placeholder is chosen."""
        assert fmt_str("12", "@=*#**") == "#12"
