"""Cursor used by the per-type option parsers."""

from nestfmt.core.errors import InvalidFormatSpecError


class OptionCursor:
    """Left-to-right reader over a field's option string."""

    def __init__(self, options: str) -> None:
        self.options = options
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        """Return the character at offset from the cursor, or "" past the end."""
        index = self.pos + offset
        if index < len(self.options):
            return self.options[index]
        return ""

    def accept(self, chars: str) -> str:
        """Consume and return the current character if it is one of chars."""
        ch = self.peek()
        if ch and ch in chars:
            self.pos += 1
            return ch
        return ""

    def accept_prefixed(self, prefix: str) -> str:
        """Consume prefix plus the following character and return that character.

        Nothing is consumed when prefix is not followed by another character.
        """
        if self.peek() == prefix and self.peek(1):
            ch = self.options[self.pos + 1]
            self.pos += 2
            return ch
        return ""

    def take(self) -> str:
        """Consume and return the current character ("" at the end)."""
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def digits(self) -> int | None:
        """Consume a run of ASCII digits and return its value, if any."""
        start = self.pos
        while self.peek() and self.peek() in "0123456789":
            self.pos += 1
        if self.pos == start:
            return None
        return int(self.options[start : self.pos])

    def expect_end(self, kind: str) -> None:
        """Raise InvalidFormatSpecError if any characters remain."""
        if self.pos < len(self.options):
            rest = self.options[self.pos :]
            raise InvalidFormatSpecError(
                self.options, f"unexpected {rest!r} in {kind} options"
            )
