"""Core functionality for nestfmt.

This module contains the exception hierarchy and render configuration.
"""

from nestfmt.core.config import RenderConfig
from nestfmt.core.errors import BindingValidationError
from nestfmt.core.errors import FieldNotFoundError
from nestfmt.core.errors import FormatError
from nestfmt.core.errors import InvalidFormatSpecError
from nestfmt.core.errors import MissingFormatDelimiterError
from nestfmt.core.errors import TemplateSyntaxError
from nestfmt.core.errors import UnsupportedTypeError
from nestfmt.core.errors import UnterminatedFieldError

__all__ = [
    "BindingValidationError",
    "FieldNotFoundError",
    "FormatError",
    "InvalidFormatSpecError",
    "MissingFormatDelimiterError",
    "RenderConfig",
    "TemplateSyntaxError",
    "UnsupportedTypeError",
    "UnterminatedFieldError",
]
