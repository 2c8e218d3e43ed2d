"""Floating point renderer.

Options are a printf-style conversion without the leading '%': an optional
'+', a width, an optional precision and an optional 'f' or 'g' conversion
('f' when omitted). For example "8.3" renders 3.14159 as "   3.142".
Width and precision are limited to MAX_FIELD_SIZE.
"""

import re

from nestfmt.core.errors import InvalidFormatSpecError
from nestfmt.template.nodes import Field

FLOAT_OPTIONS = re.compile(r"\+?(?P<width>[0-9]*)(\.(?P<precision>[0-9]*))?[fg]?")
CONVERSIONS = ("f", "g")
MAX_FIELD_SIZE = 80


def float_directive(options: str) -> str:
    """Validate options and return the printf-style directive for them.

    Raises:
        InvalidFormatSpecError: When options are not '[+]width[.precision][fg]'
            or the width or precision exceeds MAX_FIELD_SIZE

    """
    match = FLOAT_OPTIONS.fullmatch(options)
    if not match:
        raise InvalidFormatSpecError(options, "invalid floating point options")
    for part in ("width", "precision"):
        size = match.group(part)
        if size and int(size) > MAX_FIELD_SIZE:
            raise InvalidFormatSpecError(
                options, f"{part} {int(size)} exceeds {MAX_FIELD_SIZE}"
            )
    directive = f"%{options}"
    if not options.endswith(CONVERSIONS):
        directive += "f"
    return directive


def render_float(value: float, field: Field) -> str:
    """Render a float for a field."""
    return float_directive(field.options) % value
