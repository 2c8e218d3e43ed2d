"""Template parsing: the Field/Format tree and its parser."""

from nestfmt.template.nodes import Field
from nestfmt.template.nodes import Format
from nestfmt.template.parser import parse
from nestfmt.template.validation import collect_names
from nestfmt.template.validation import validate_missing_or_extra

__all__ = [
    "Field",
    "Format",
    "collect_names",
    "parse",
    "validate_missing_or_extra",
]
