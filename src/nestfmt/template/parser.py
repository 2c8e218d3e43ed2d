"""Recursive-descent parser for the template mini-language.

Grammar::

    format     ::=  [ static | field ]
    static     ::=  /([^{}~]|~.)+/
    field      ::=  '{' name < ':' options [ ':' subformat ] > '}'
    name       ::=  /([^:}~]|~.)*/
    options    ::=  /([^:}~]|~.)*/
    subformat  ::=  format

Examples:

    "Hello {name}"         one static field and one dynamic field with no
                           options and no subformats
    "Hello {name:30U}"     same, with options "30U"
    "{vec::{x:+4}}"        one dynamic field with empty options and one
                           subformat whose only field has options "+4"
    "{mac:17x,2~:}"        one dynamic field with options "17x,2:"
"""

import logging

from nestfmt.core.errors import MissingFormatDelimiterError
from nestfmt.core.errors import TemplateSyntaxError
from nestfmt.core.errors import UnterminatedFieldError
from nestfmt.template.nodes import Field
from nestfmt.template.nodes import Format

logger = logging.getLogger(__name__)

ESCAPE = "~"
FIELD_OPEN = "{"
FIELD_CLOSE = "}"
OPTION_SEP = ":"


class _Scanner:
    """Cursor over the template text with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        """Return the current character, or "" at the end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self) -> str:
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def read_run(self, stops: str) -> str:
        """Consume characters up to one of stops, resolving escape pairs.

        An escape character followed by any character yields that character.
        A trailing escape character with nothing after it is kept literally.
        """
        chars: list[str] = []
        while not self.at_end():
            ch = self.peek()
            if ch == ESCAPE and self.pos + 1 < len(self.text):
                self.pos += 1
            elif ch in stops:
                break
            chars.append(self.advance())
        return "".join(chars)


def parse(template: str) -> Format:
    """Parse a template string into a Format tree.

    Args:
        template: Template text using '{name:options:subformat}' fields

    Returns:
        Immutable parsed Format

    Raises:
        TypeError: When template is not a string
        UnterminatedFieldError: When a field is never closed
        MissingFormatDelimiterError: When a subformat is not followed by '}'
            or a '}' has no matching '{'
        TemplateSyntaxError: When nesting exceeds the interpreter recursion limit

    """
    if not isinstance(template, str):
        msg = f"Template must be str, got {type(template).__name__}"
        raise TypeError(msg)

    scanner = _Scanner(template)
    try:
        result = _parse_format(scanner)
    except RecursionError:
        raise TemplateSyntaxError(
            "Subformats nested too deeply", template, scanner.pos
        ) from None
    if not scanner.at_end():
        raise MissingFormatDelimiterError(
            f"Unmatched '{FIELD_CLOSE}'", template, scanner.pos
        )
    logger.debug("Parsed template %.100r into %d fields", template, len(result))
    return result


def _parse_format(scanner: _Scanner) -> Format:
    """Parse fields until the end of input or an unconsumed '}'."""
    fields: list[Field] = []
    pending_static: list[str] = []

    def flush_static() -> None:
        if pending_static:
            fields.append(Field(options="".join(pending_static)))
            pending_static.clear()

    while not scanner.at_end() and scanner.peek() != FIELD_CLOSE:
        static = scanner.read_run(FIELD_OPEN + FIELD_CLOSE)
        if static:
            pending_static.append(static)
        if scanner.peek() == FIELD_OPEN:
            field = _parse_field(scanner)
            if field.is_static:
                # "{}" and "{:text}" contribute literal text only
                pending_static.append(field.options)
            else:
                flush_static()
                fields.append(field)

    flush_static()
    return Format(tuple(fields))


def _parse_field(scanner: _Scanner) -> Field:
    """Parse a single '{...}' field; the cursor is on the opening brace."""
    scanner.advance()
    stops = OPTION_SEP + FIELD_CLOSE
    name = scanner.read_run(stops)
    options = ""
    subformats: list[Format] = []
    if scanner.peek() == OPTION_SEP:
        scanner.advance()
        options = scanner.read_run(stops)
        while scanner.peek() == OPTION_SEP:
            scanner.advance()
            subformats.append(_parse_format(scanner))

    if scanner.peek() != FIELD_CLOSE:
        if subformats:
            raise MissingFormatDelimiterError(
                f"'{FIELD_CLOSE}' expected after subformat of field {name!r}",
                scanner.text,
                scanner.pos,
            )
        raise UnterminatedFieldError(
            f"'{FIELD_CLOSE}' expected to close field {name!r}",
            scanner.text,
            scanner.pos,
        )
    scanner.advance()
    return Field(name=name, options=options, subformats=tuple(subformats))
