"""Template validation utilities."""

from collections.abc import Iterable

from nestfmt.core.errors import BindingValidationError
from nestfmt.template.nodes import Format


def collect_names(fmt: Format) -> set[str]:
    """Extract the names a caller must bind to render a Format.

    Only top-level dynamic fields are collected: names inside subformats
    ('*', '*1', 'c', ...) are bound by the composite renderers themselves.

    Args:
        fmt: Parsed template

    Returns:
        Set of field names referenced at the top level

    """
    return {field.name for field in fmt if not field.is_static}


def validate_missing_or_extra(
    names_required: set[str], provided: Iterable[str]
) -> None:
    """Validate that all required names are provided without extras.

    Args:
        names_required: Set of names required by the template
        provided: Names bound by the caller

    Raises:
        BindingValidationError: When names are missing or extra

    """
    provided_set = set(provided)
    missing = names_required - provided_set
    extra = provided_set - names_required

    if missing or extra:
        raise BindingValidationError(missing, extra)
