"""Renderers for sequences, pairs and containers.

Sequence: options are the separator placed between elements. The first
subformat renders each element, bound to the name '*'; "{*}" is used when no
subformat is given.

Pair: options are unused. The first subformat renders the pair with its items
bound to '*1' and '*2'; "({*1}, {*2})" is used when no subformat is given.

Containers: options give the opening and closing markers (half of the
characters each). The first subformat renders the elements, wrapped as a
sequence and bound to the name 'c'. Each container kind has default markers
and a default subformat, see the *_KIND constants below.
"""

from collections import deque
from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Set
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict

from nestfmt.core.errors import UnsupportedTypeError
from nestfmt.dispatch.bindings import FormatDict
from nestfmt.engine import render
from nestfmt.template.nodes import Field
from nestfmt.template.nodes import Format
from nestfmt.template.parser import parse

ELEMENT_NAME = "*"
FIRST_NAME = "*1"
SECOND_NAME = "*2"
CONTAINER_NAME = "c"

ELEMENT_FORMAT = parse("{*}")
PAIR_FORMAT = parse("({*1}, {*2})")


class Sequence(BaseModel):
    """Elements rendered one after the other with a separator.

    Use sequence() to wrap any iterable; the items are materialised so the
    same binding renders identically every time.
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[Any, ...] = ()


class ContainerKind(BaseModel):
    """Default markers and element subformat for a container type."""

    model_config = ConfigDict(frozen=True)

    opening: str
    closing: str
    body: Format


LIST_KIND = ContainerKind(opening="[", closing="]", body=parse("{c:, }"))
DEQUE_KIND = ContainerKind(opening="(", closing=")", body=parse("{c: }"))
SET_KIND = ContainerKind(opening="{", closing="}", body=parse("{c:, }"))
MAPPING_KIND = ContainerKind(
    opening="{|", closing="|}", body=parse("{c:, :{*::{*1} -> {*2}}}")
)


def sequence(items: Iterable[object]) -> Sequence:
    """Wrap an iterable so it renders as a separated sequence of elements."""
    return Sequence(items=tuple(items))


def render_sequence(value: Sequence, field: Field) -> str:
    """Render each element with the element subformat, joined by options."""
    element_format = field.subformat()
    if element_format is None:
        element_format = ELEMENT_FORMAT
    return field.options.join(
        render(element_format, FormatDict().bind(ELEMENT_NAME, item))
        for item in value.items
    )


def render_pair(value: tuple[Any, ...], field: Field) -> str:
    """Render a 2-tuple with its items bound to '*1' and '*2'.

    Raises:
        UnsupportedTypeError: When the tuple does not have exactly two items

    """
    if len(value) != 2:
        raise UnsupportedTypeError(type(value), f"tuple of length {len(value)}")
    first, second = value
    pair_format = field.subformat()
    if pair_format is None:
        pair_format = PAIR_FORMAT
    return render(
        pair_format,
        FormatDict().bind(FIRST_NAME, first).bind(SECOND_NAME, second),
    )


def render_container(
    items: Iterable[object], field: Field, kind: ContainerKind
) -> str:
    """Render items between markers using the container subformat.

    The opening marker is the first half of options and the closing marker
    the last half; with an odd length the middle character is dropped.
    """
    size = len(field.options)
    opening = field.options[: size // 2] if size else kind.opening
    closing = field.options[size - size // 2 :] if size else kind.closing
    body_format = field.subformat()
    if body_format is None:
        body_format = kind.body
    body = render(body_format, FormatDict().bind(CONTAINER_NAME, sequence(items)))
    return f"{opening}{body}{closing}"


def render_list(value: list[Any], field: Field) -> str:
    """Render a list, by default as "[a, b, c]"."""
    return render_container(value, field, LIST_KIND)


def render_deque(value: deque[Any], field: Field) -> str:
    """Render a deque, by default as "(a b c)"."""
    return render_container(value, field, DEQUE_KIND)


def render_set(value: Set[Any], field: Field) -> str:
    """Render a set, by default as "{a, b, c}".

    Elements are sorted when they can be compared with each other.
    """
    try:
        items = sorted(value)
    except TypeError:
        items = list(value)
    return render_container(items, field, SET_KIND)


def render_mapping(value: Mapping[Any, Any], field: Field) -> str:
    """Render a mapping in insertion order, by default as "{|k -> v, ...|}"."""
    return render_container(value.items(), field, MAPPING_KIND)
