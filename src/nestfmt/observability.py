"""OpenTelemetry tracing around template rendering."""

import hashlib
import time

from opentelemetry import trace

from nestfmt.dispatch.bindings import FormatDict
from nestfmt.engine import render
from nestfmt.template.nodes import Format
from nestfmt.template.validation import collect_names

tracer = trace.get_tracer(__name__)


def render_with_observability(
    fmt: Format,
    bindings: FormatDict,
    *,
    source: str | None = None,
    preview_length: int = 100,
) -> str:
    """Render a parsed template inside an OpenTelemetry span.

    Args:
        fmt: Parsed template
        bindings: Values referenced by the template
        source: Original template text, used for the template hash
        preview_length: Number of template characters hashed

    Returns:
        Rendered string

    """
    with tracer.start_as_current_span("nestfmt.render") as span:
        start_time = time.perf_counter()

        span.set_attribute("nestfmt.field_count", len(fmt))
        span.set_attribute("nestfmt.binding_count", len(bindings))
        if source is not None:
            span.set_attribute(
                "nestfmt.template_hash", _hash_template(source, preview_length)
            )

        names_required = collect_names(fmt)
        span.set_attribute("nestfmt.required_names", ",".join(sorted(names_required)))
        missing = names_required - bindings.names()
        if missing:
            span.set_attribute("nestfmt.missing_names", ",".join(sorted(missing)))

        result = render(fmt, bindings)

        render_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("nestfmt.render_ms", render_ms)
        span.set_attribute("nestfmt.result_length", len(result))

        return result


def _hash_template(source: str, preview_length: int = 100) -> str:
    """Generate a short hash of the template text for telemetry."""
    return hashlib.sha256(source[:preview_length].encode()).hexdigest()[:16]
