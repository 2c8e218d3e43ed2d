"""Open registry mapping value types to renderer functions.

Built-in renderers register themselves from nestfmt.renderers. Additional
types are plugged in with register_renderer, or by giving the type a
to_string(field) method.
"""

from functools import singledispatch
from typing import TypeVar

from nestfmt.core.errors import UnsupportedTypeError
from nestfmt.dispatch.types import Renderable
from nestfmt.dispatch.types import RenderFunction
from nestfmt.template.nodes import Field

F = TypeVar("F", bound=RenderFunction)


@singledispatch
def render_value(value: object, field: Field) -> str:
    """Render value for field using the renderer registered for its type.

    Raises:
        UnsupportedTypeError: When no renderer is registered for the type

    """
    raise UnsupportedTypeError(type(value))


def register_renderer(cls: type, func: F) -> F:
    """Register func as the renderer for cls and its subclasses.

    Args:
        cls: Type whose values func can render
        func: Callable taking (value, field) and returning the rendered text

    Returns:
        func, unchanged

    """
    render_value.register(cls, func)
    return func


def resolve_renderer(value: object) -> RenderFunction:
    """Find the renderer for value.

    Values implementing Renderable render themselves; everything else is
    looked up by concrete type. Unknown types resolve to a renderer that
    raises UnsupportedTypeError when called.
    """
    if isinstance(value, Renderable):
        return _render_self
    return render_value.dispatch(type(value))


def is_renderable(value: object) -> bool:
    """Return True when value has a renderer other than the failing default."""
    return resolve_renderer(value) is not render_value.dispatch(object)


def _render_self(value: Renderable, field: Field) -> str:
    return value.to_string(field)
