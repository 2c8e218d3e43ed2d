"""Format engine: walks a parsed Format and concatenates the renderings."""

from nestfmt.dispatch.bindings import FormatDict
from nestfmt.template.nodes import Format


def render(fmt: Format, bindings: FormatDict) -> str:
    """Render a parsed template with the given bindings.

    Static fields contribute their literal text; dynamic fields contribute the
    rendering of the value bound to their name.

    Args:
        fmt: Parsed template
        bindings: Values referenced by the template's top-level fields

    Returns:
        Rendered string

    Raises:
        FieldNotFoundError: When a referenced name is not bound
        UnsupportedTypeError: When a bound value has no renderer
        InvalidFormatSpecError: When a field's options are rejected

    """
    parts: list[str] = []
    for field in fmt:
        if field.is_static:
            parts.append(field.options)
        else:
            parts.append(bindings.lookup(field.name).to_string(field))
    return "".join(parts)
