"""Built-in renderers and their registration."""

from collections import deque
from collections.abc import Mapping
from collections.abc import Set

from nestfmt.dispatch.registry import register_renderer
from nestfmt.renderers.composite import Sequence
from nestfmt.renderers.composite import render_deque
from nestfmt.renderers.composite import render_list
from nestfmt.renderers.composite import render_mapping
from nestfmt.renderers.composite import render_pair
from nestfmt.renderers.composite import render_sequence
from nestfmt.renderers.composite import render_set
from nestfmt.renderers.composite import sequence
from nestfmt.renderers.enums import Align
from nestfmt.renderers.enums import CaseConversion
from nestfmt.renderers.enums import StripMode
from nestfmt.renderers.floating import render_float
from nestfmt.renderers.integer import render_int
from nestfmt.renderers.string import render_str

__all__ = [
    "Align",
    "CaseConversion",
    "Sequence",
    "StripMode",
    "register_builtin_renderers",
    "sequence",
]


def register_builtin_renderers() -> None:
    """Register the renderers for the built-in value types."""
    register_renderer(int, render_int)
    register_renderer(float, render_float)
    register_renderer(str, render_str)
    register_renderer(Sequence, render_sequence)
    register_renderer(tuple, render_pair)
    register_renderer(list, render_list)
    register_renderer(deque, render_deque)
    register_renderer(Set, render_set)
    register_renderer(Mapping, render_mapping)


register_builtin_renderers()
