"""Type-erased value bindings and open renderer dispatch."""

from nestfmt.dispatch.bindings import BoundValue
from nestfmt.dispatch.bindings import FormatDict
from nestfmt.dispatch.registry import is_renderable
from nestfmt.dispatch.registry import register_renderer
from nestfmt.dispatch.registry import render_value
from nestfmt.dispatch.registry import resolve_renderer
from nestfmt.dispatch.types import Renderable
from nestfmt.dispatch.types import RenderFunction

__all__ = [
    "BoundValue",
    "FormatDict",
    "RenderFunction",
    "Renderable",
    "is_renderable",
    "register_renderer",
    "render_value",
    "resolve_renderer",
]
