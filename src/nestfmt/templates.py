"""Template class: parse once, render many times."""

from collections.abc import Mapping
import logging

from nestfmt.core.config import RenderConfig
from nestfmt.dispatch.bindings import FormatDict
from nestfmt.engine import render
from nestfmt.observability import render_with_observability
from nestfmt.template.nodes import Format
from nestfmt.template.parser import parse
from nestfmt.template.validation import collect_names
from nestfmt.template.validation import validate_missing_or_extra

logger = logging.getLogger(__name__)


class Template:
    """A parsed template bound to its source text and render configuration."""

    def __init__(self, source: str, *, config: RenderConfig | None = None) -> None:
        """Parse a template.

        Args:
            source: Template text
            config: Render configuration (defaults to RenderConfig())

        Raises:
            TemplateSyntaxError: When source is not a valid template

        """
        self.source = source
        self.config = config or RenderConfig()
        self.format: Format = parse(source)
        self._names = frozenset(collect_names(self.format))

    @property
    def names(self) -> frozenset[str]:
        """Names that must be bound to render this template."""
        return self._names

    def render(
        self,
        bindings: FormatDict | Mapping[str, object] | None = None,
        /,
        **values: object,
    ) -> str:
        """Render the template.

        Args:
            bindings: A FormatDict, or a mapping of names to values
            **values: Additional bindings, overriding those in bindings

        Returns:
            Rendered string

        Raises:
            BindingValidationError: In strict mode, when bound names do not
                match the template's names
            FieldNotFoundError: When a referenced name is not bound
            UnsupportedTypeError: When a bound value has no renderer
            InvalidFormatSpecError: When a field's options are rejected

        """
        format_dict = _to_format_dict(bindings, values)
        if self.config.strict:
            validate_missing_or_extra(set(self._names), format_dict.names())

        logger.debug(
            "Rendering template %r with %d bindings",
            self.source[: self.config.max_template_preview],
            len(format_dict),
        )
        if self.config.trace:
            return render_with_observability(
                self.format,
                format_dict,
                source=self.source,
                preview_length=self.config.max_template_preview,
            )
        return render(self.format, format_dict)

    def __mod__(self, bindings: FormatDict | Mapping[str, object]) -> str:
        """Render with the % operator: template % {"name": value}."""
        return self.render(bindings)

    def __repr__(self) -> str:
        return f"Template({self.source!r})"


def from_template(source: str, *, config: RenderConfig | None = None) -> Template:
    """Create a template from a template string.

    Args:
        source: Template text
        config: Optional render configuration

    Returns:
        Parsed template instance

    """
    return Template(source, config=config)


def _to_format_dict(
    bindings: FormatDict | Mapping[str, object] | None,
    values: Mapping[str, object],
) -> FormatDict:
    if isinstance(bindings, FormatDict):
        format_dict = bindings.copy() if values else bindings
        for name, value in values.items():
            format_dict.bind(name, value)
        return format_dict
    return FormatDict(bindings, **values)
