"""String renderer.

There are two modes. In picture mode the options are a pattern where each
placeholder character (default '#') takes the next character of the value.
In general mode the options give fixed width with alignment, case
conversion, stripping and escaping.

Grammar::

    options          ::=  general-format | picture-format

    general-format   ::=  { align }
                          width
                          { '=' filler }
                          { '>' overflowchar }
                          { 'U' | 'l' }
                          { 's' { 'L' | 'R' } }
                          { '/' 'C' }

    picture-format   ::=  '@' { '=' placeholder } { '<' filler } [ char ]
"""

from pydantic import BaseModel
from pydantic import ConfigDict

from nestfmt.renderers.enums import Align
from nestfmt.renderers.enums import CaseConversion
from nestfmt.renderers.enums import StripMode
from nestfmt.renderers.options import OptionCursor
from nestfmt.template.nodes import Field

PICTURE_PREFIX = "@"
STRIP_CHAR = " "


class PictureSpec(BaseModel):
    """Parsed picture-mode options."""

    model_config = ConfigDict(frozen=True)

    placeholder: str = "#"
    filler: str = " "
    pattern: str = ""


class StringSpec(BaseModel):
    """Parsed general-mode options."""

    model_config = ConfigDict(frozen=True)

    align: Align = Align.LEFT
    width: int = 0
    filler: str = " "
    overflow: str = ""
    case: CaseConversion = CaseConversion.NONE
    strip: StripMode = StripMode.NONE
    escape: str = ""


def parse_picture_options(options: str) -> PictureSpec:
    """Parse picture-mode options; options must start with '@'."""
    cursor = OptionCursor(options)
    cursor.accept(PICTURE_PREFIX)
    placeholder = cursor.accept_prefixed("=") or "#"
    filler = cursor.accept_prefixed("<") or " "
    return PictureSpec(
        placeholder=placeholder,
        filler=filler,
        pattern=options[cursor.pos :],
    )


def parse_string_options(options: str) -> StringSpec:
    """Parse general-mode options.

    Raises:
        InvalidFormatSpecError: When characters remain after the grammar has
            been consumed

    """
    cursor = OptionCursor(options)
    align = Align(cursor.accept("<=>") or Align.LEFT)
    width = cursor.digits() or 0
    filler = cursor.accept_prefixed("=") or " "
    overflow = cursor.accept_prefixed(">")
    case = CaseConversion(cursor.accept("Ul"))

    strip = StripMode.NONE
    if cursor.accept("s"):
        side = cursor.accept("LR")
        strip = StripMode(side) if side else StripMode.BOTH

    # '/C' is reserved; it is accepted and has no effect on the output
    escape = ""
    if cursor.peek() == "/" and cursor.peek(1) == "C":
        escape = cursor.accept_prefixed("/")

    cursor.expect_end("string")
    return StringSpec(
        align=align,
        width=width,
        filler=filler,
        overflow=overflow,
        case=case,
        strip=strip,
        escape=escape,
    )


def format_picture(value: str, spec: PictureSpec) -> str:
    """Stamp the characters of value into the placeholders of the pattern."""
    chars = iter(value)
    result: list[str] = []
    for ch in spec.pattern:
        if ch == spec.placeholder:
            result.append(next(chars, spec.filler))
        else:
            result.append(ch)
    return "".join(result)


def format_string(value: str, spec: StringSpec) -> str:
    """Format value according to general-mode spec."""
    result = value
    if spec.strip in (StripMode.LEFT, StripMode.BOTH):
        result = result.lstrip(STRIP_CHAR)
    if spec.strip in (StripMode.RIGHT, StripMode.BOTH):
        result = result.rstrip(STRIP_CHAR)

    if spec.width > 0 and spec.overflow and len(result) > spec.width:
        return spec.overflow * spec.width

    if spec.width > 0:
        if len(result) > spec.width:
            result = result[: spec.width]
        else:
            left = right = 0
            while len(result) + left + right < spec.width:
                if spec.align is not Align.LEFT:
                    left += 1
                total = len(result) + left + right
                if total < spec.width and spec.align is not Align.RIGHT:
                    right += 1
            result = spec.filler * left + result + spec.filler * right

    match spec.case:
        case CaseConversion.UPPER:
            return result.upper()
        case CaseConversion.LOWER:
            return result.lower()
    return result


def render_str(value: str, field: Field) -> str:
    """Render a string for a field in picture or general mode."""
    if field.options.startswith(PICTURE_PREFIX):
        return format_picture(value, parse_picture_options(field.options))
    return format_string(value, parse_string_options(field.options))
