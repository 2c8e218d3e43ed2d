"""Name to value bindings consumed by the format engine."""

from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any
from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict

from nestfmt.core.errors import FieldNotFoundError
from nestfmt.dispatch.registry import resolve_renderer
from nestfmt.dispatch.types import RenderFunction
from nestfmt.template.nodes import Field


class BoundValue(BaseModel):
    """A value boxed together with the renderer resolved for its type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any
    renderer: RenderFunction

    def to_string(self, field: Field) -> str:
        """Render the boxed value for field."""
        return self.renderer(self.value, field)


class FormatDict:
    """Per-render binding of names to values.

    Binding never fails: the renderer is resolved when the value is bound and
    types without a renderer only raise when a template actually renders them.
    Rebinding a name replaces the previous value.
    """

    def __init__(
        self, values: Mapping[str, object] | None = None, /, **kwargs: object
    ) -> None:
        """Initialize with optional initial bindings.

        Args:
            values: Mapping of names to values, bound in iteration order
            **kwargs: Additional bindings, applied after values

        """
        self._env: dict[str, BoundValue] = {}
        if values:
            for name, value in values.items():
                self.bind(name, value)
        for name, value in kwargs.items():
            self.bind(name, value)

    def bind(self, name: str, value: object) -> Self:
        """Bind value to name, replacing any previous binding.

        Returns:
            This FormatDict, so calls can be chained

        """
        self._env[name] = BoundValue(value=value, renderer=resolve_renderer(value))
        return self

    def lookup(self, name: str) -> BoundValue:
        """Return the binding for name.

        Raises:
            FieldNotFoundError: When name is not bound

        """
        try:
            return self._env[name]
        except KeyError:
            raise FieldNotFoundError(name) from None

    def copy(self) -> Self:
        """Return a new FormatDict holding the same bindings."""
        clone = type(self)()
        clone._env = dict(self._env)
        return clone

    def names(self) -> set[str]:
        """Return the set of bound names."""
        return set(self._env)

    def __contains__(self, name: object) -> bool:
        return name in self._env

    def __len__(self) -> int:
        return len(self._env)

    def __iter__(self) -> Iterator[str]:
        return iter(self._env)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v.value!r}" for k, v in self._env.items())
        return f"FormatDict({inner})"
