"""Custom exceptions for nestfmt.

Parse-time errors derive from TemplateSyntaxError; the remaining errors are
raised while rendering a parsed template.
"""

from collections.abc import Set


class FormatError(Exception):
    """Base exception for template parsing and rendering errors."""


class TemplateSyntaxError(FormatError, ValueError):
    """Raised when a template string is not syntactically valid."""

    def __init__(self, message: str, template: str, position: int) -> None:
        """Initialize with the offending template and cursor position."""
        self.template = template
        self.position = position
        super().__init__(f"{message} at position {position}: {template[:100]!r}")


class UnterminatedFieldError(TemplateSyntaxError):
    """Raised when a field is opened with '{' and the input ends before '}'."""


class MissingFormatDelimiterError(TemplateSyntaxError):
    """Raised when a subformat is not followed by '}' or a '}' is unmatched."""


class FieldNotFoundError(FormatError, KeyError):
    """Raised when a template references a name that has no binding."""

    def __init__(self, name: str) -> None:
        """Initialize with the missing field name."""
        self.name = name
        super().__init__(f"Field not present: '{name}'")

    def __str__(self) -> str:
        """Avoid KeyError's repr-style message."""
        return str(self.args[0])


class UnsupportedTypeError(FormatError, TypeError):
    """Raised when a bound value has no renderer for its type."""

    def __init__(self, value_type: type, detail: str = "") -> None:
        """Initialize with the type that could not be rendered."""
        self.value_type = value_type
        msg = f"Unsupported type: {value_type.__name__}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class InvalidFormatSpecError(FormatError, ValueError):
    """Raised when a field's options do not match the renderer's grammar."""

    def __init__(self, options: str, reason: str) -> None:
        """Initialize with the rejected options and the reason."""
        self.options = options
        self.reason = reason
        super().__init__(f"Invalid format options {options!r}: {reason}")


class BindingValidationError(FormatError, ValueError):
    """Raised when bound names do not match the names a template requires."""

    def __init__(self, missing: Set[str], extra: Set[str]) -> None:
        """Initialize with the missing and unexpected names."""
        self.missing = frozenset(missing)
        self.extra = frozenset(extra)
        msg_parts = []
        if missing:
            msg_parts.append(f"Missing names: {', '.join(sorted(missing))}")
        if extra:
            msg_parts.append(f"Extra names: {', '.join(sorted(extra))}")
        super().__init__("; ".join(msg_parts))
