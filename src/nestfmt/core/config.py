"""Render configuration for templates.

This module provides the options that control how a Template renders:
binding validation and tracing.
"""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class RenderConfig(BaseModel):
    """Configuration for template rendering.

    Attributes:
        strict: Whether the bound names must match the template's top-level
            field names exactly. When enabled, missing or unused bindings raise
            BindingValidationError before anything is rendered. Default is
            False, matching plain render() which only fails on missing names.
        trace: Whether to render inside an OpenTelemetry span carrying
            template and timing attributes. Default is False.
        max_template_preview: Number of template characters kept in log and
            span attributes. Default is 100.

    """

    model_config = ConfigDict(frozen=True)

    strict: bool = Field(default=False)
    trace: bool = Field(default=False)
    max_template_preview: int = Field(default=100, ge=0, le=10_000)
