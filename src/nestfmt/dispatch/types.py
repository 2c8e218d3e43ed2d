"""Core types and protocols for renderer dispatch."""

from collections.abc import Callable
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from nestfmt.template.nodes import Field

RenderFunction = Callable[[Any, Field], str]
"""Type alias for renderer functions.

A renderer receives the bound value and the dynamic Field that referenced it,
and returns the rendered text. Options and subformats are read from the field.
"""


@runtime_checkable
class Renderable(Protocol):
    """Protocol for values that know how to render themselves.

    Any object providing to_string can be bound and rendered without a
    registration step.

    Example:
        ```python
        class Point:
            def __init__(self, x: int, y: int) -> None:
                self.x, self.y = x, y

            def to_string(self, field: Field) -> str:
                return render(
                    parse("P({x:+4}; {y:+4})"),
                    FormatDict(x=self.x, y=self.y),
                )
        ```

    """

    def to_string(self, field: Field) -> str:
        """Render the value using the field's options and subformats."""
        ...
