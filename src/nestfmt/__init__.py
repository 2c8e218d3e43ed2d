"""nestfmt - nested, type-dispatched string formatting.

Templates are parsed once into an immutable tree of fields such as
"{name:30U}" or "{items:, :{*:04}}", then rendered any number of times with a
FormatDict binding names to values. Each bound value is rendered by the
renderer registered for its type, using the field's options and subformats.

Example:
    ```python
    from nestfmt import FormatDict, parse, render, sequence

    fmt = parse("{n:,} items: {xs:, :{*:03}}")
    render(fmt, FormatDict(n=1234567, xs=sequence([1, 2])))
    # '1,234,567 items: 001, 002'
    ```
"""

from nestfmt.core import BindingValidationError
from nestfmt.core import FieldNotFoundError
from nestfmt.core import FormatError
from nestfmt.core import InvalidFormatSpecError
from nestfmt.core import MissingFormatDelimiterError
from nestfmt.core import RenderConfig
from nestfmt.core import TemplateSyntaxError
from nestfmt.core import UnsupportedTypeError
from nestfmt.core import UnterminatedFieldError
from nestfmt.dispatch import BoundValue
from nestfmt.dispatch import FormatDict
from nestfmt.dispatch import Renderable
from nestfmt.dispatch import RenderFunction
from nestfmt.dispatch import is_renderable
from nestfmt.dispatch import register_renderer
from nestfmt.engine import render
from nestfmt.observability import render_with_observability
from nestfmt.project_info import ProjectInfo
from nestfmt.project_info import get_project_info
from nestfmt.renderers import Align
from nestfmt.renderers import CaseConversion
from nestfmt.renderers import Sequence
from nestfmt.renderers import StripMode
from nestfmt.renderers import sequence
from nestfmt.template import Field
from nestfmt.template import Format
from nestfmt.template import collect_names
from nestfmt.template import parse
from nestfmt.template import validate_missing_or_extra
from nestfmt.templates import Template
from nestfmt.templates import from_template

# Public API - supports both direct and module imports
__all__ = [
    "Align",
    "BindingValidationError",
    "BoundValue",
    "CaseConversion",
    "Field",
    "FieldNotFoundError",
    "Format",
    "FormatDict",
    "FormatError",
    "InvalidFormatSpecError",
    "MissingFormatDelimiterError",
    "ProjectInfo",
    "RenderConfig",
    "RenderFunction",
    "Renderable",
    "Sequence",
    "StripMode",
    "Template",
    "TemplateSyntaxError",
    "UnsupportedTypeError",
    "UnterminatedFieldError",
    "collect_names",
    "from_template",
    "get_project_info",
    "is_renderable",
    "parse",
    "register_renderer",
    "render",
    "render_with_observability",
    "sequence",
]
__version__ = get_project_info().version
