"""Integer renderer.

Option grammar::

    options     ::=  { align }
                     { plus }
                     { '0' | '=' filler }
                     width
                     { '>' overflowchar }
                     { 'x' | 'X' | '/' base { 'U' } }
                     { ',' [ '0'-'9' ] { sepchar } }

    align       ::=  '<' | '=' | '>'
    plus        ::=  '+'
    width       ::=  [ '0'-'9' ]
    base        ::=  '1'-'9' [ '0'-'9' ]

Examples: "04" zero-pads to four columns, "X" is uppercase hexadecimal,
"/2,4_" is binary grouped by four with '_', "<+=*8" left-aligns with an
explicit sign and '*' padding.
"""

from pydantic import BaseModel
from pydantic import ConfigDict

from nestfmt.core.errors import InvalidFormatSpecError
from nestfmt.renderers.enums import Align
from nestfmt.renderers.options import OptionCursor
from nestfmt.template.nodes import Field

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)
DEFAULT_GROUP_SIZE = 3


class IntegerSpec(BaseModel):
    """Parsed integer options."""

    model_config = ConfigDict(frozen=True)

    align: Align = Align.RIGHT
    plus: bool = False
    filler: str = " "
    width: int = 0
    overflow: str = ""
    base: int = 10
    upcase: bool = False
    group: int = 0
    group_sep: str = ","


def parse_integer_options(options: str) -> IntegerSpec:
    """Parse an integer option string.

    Raises:
        InvalidFormatSpecError: When the base is outside 2..36 or characters
            remain after the grammar has been consumed

    """
    cursor = OptionCursor(options)
    align = Align(cursor.accept("<=>") or Align.RIGHT)
    plus = bool(cursor.accept("+"))
    filler = cursor.accept_prefixed("=") or cursor.accept("0") or " "
    width = cursor.digits() or 0
    overflow = cursor.accept_prefixed(">")

    base = 10
    upcase = False
    if cursor.accept("/"):
        base = cursor.digits() or 0
        upcase = bool(cursor.accept("U"))
    elif cursor.accept("x"):
        base = 16
    elif cursor.accept("X"):
        base = 16
        upcase = True

    group = 0
    group_sep = ","
    if cursor.accept(","):
        group = cursor.digits() or DEFAULT_GROUP_SIZE
        group_sep = cursor.take() or group_sep

    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidFormatSpecError(
            options, f"base {base} outside {MIN_BASE}..{MAX_BASE}"
        )
    cursor.expect_end("integer")

    return IntegerSpec(
        align=align,
        plus=plus,
        filler=filler,
        width=width,
        overflow=overflow,
        base=base,
        upcase=upcase,
        group=group,
        group_sep=group_sep,
    )


def format_integer(value: int, spec: IntegerSpec) -> str:
    """Format value according to spec.

    The text is built right to left in a reversed buffer: digits first, then
    zero fill, then the sign, then padding. The buffer is flipped at the end.
    """
    digit_chars = DIGITS.upper() if spec.upcase else DIGITS
    negative = value < 0
    x = -value if negative else value
    sign_width = 1 if (negative or spec.plus) else 0

    buf: list[str] = []
    digits = 0
    while True:
        x, d = divmod(x, spec.base)
        buf.append(digit_chars[d])
        digits += 1
        if digits == spec.group and x != 0:
            buf.append(spec.group_sep)
            digits = 0
        if x == 0:
            break

    # Zero fill goes between the digits and the sign and keeps grouping
    if spec.align is Align.RIGHT and spec.filler == "0":
        limit = spec.width - sign_width
        while len(buf) < limit:
            buf.append("0")
            digits += 1
            if digits == spec.group and len(buf) < limit - 1:
                buf.append(spec.group_sep)
                digits = 0

    if negative:
        buf.append("-")
    elif spec.plus:
        buf.append("+")

    if spec.width:
        if len(buf) > spec.width:
            if spec.overflow:
                return spec.overflow * spec.width
        else:
            # Front of the reversed buffer is the right edge of the output
            while len(buf) < spec.width:
                if spec.align is not Align.RIGHT:
                    buf.insert(0, spec.filler)
                if len(buf) < spec.width and spec.align is not Align.LEFT:
                    buf.append(spec.filler)

    return "".join(reversed(buf))


def render_int(value: int, field: Field) -> str:
    """Render an integer for a field."""
    return format_integer(value, parse_integer_options(field.options))
