"""Parsed template tree: fields and formats."""

from collections.abc import Iterator

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import RootModel


class Field(BaseModel):
    """One unit of a parsed template.

    A field with an empty name is static and its options hold literal text.
    A field with a name is dynamic: options is the raw option string handed to
    the renderer of the bound value and subformats are nested templates used
    by composite renderers.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    options: str = ""
    subformats: tuple["Format", ...] = ()

    @property
    def is_static(self) -> bool:
        """Return True when the field holds literal text."""
        return not self.name

    def subformat(self, index: int = 0) -> "Format | None":
        """Return the subformat at index, or None when it was not given."""
        if index < len(self.subformats):
            return self.subformats[index]
        return None


class Format(RootModel[tuple[Field, ...]]):
    """Immutable ordered sequence of fields produced by the parser."""

    model_config = ConfigDict(frozen=True)

    root: tuple[Field, ...] = ()

    def __iter__(self) -> Iterator[Field]:  # type: ignore[override]
        """Iterate over the fields in output order."""
        return iter(self.root)

    def __len__(self) -> int:
        """Return the number of fields."""
        return len(self.root)

    def __getitem__(self, index: int) -> Field:
        """Return the field at index."""
        return self.root[index]


Field.model_rebuild()
