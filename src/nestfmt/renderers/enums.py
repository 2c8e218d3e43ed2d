"""Type-safe enumerations for renderer options."""

from enum import StrEnum


class Align(StrEnum):
    """Alignment of padded output, spelled as in option strings."""

    LEFT = "<"
    CENTER = "="
    RIGHT = ">"


class CaseConversion(StrEnum):
    """Case conversion applied by the string renderer."""

    NONE = ""
    UPPER = "U"
    LOWER = "l"


class StripMode(StrEnum):
    """Which sides of a string have their spaces stripped."""

    NONE = "none"
    LEFT = "L"
    RIGHT = "R"
    BOTH = "both"
