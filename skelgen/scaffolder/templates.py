"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which renders template strings (file
paths, file contents and option defaults) against resolved option values.
Each renderer owns its own Jinja2 environment and filter set, so instances can
be configured and tested independently.

References to values that were never resolved render as :data:`NO_VALUE`
instead of failing; the generator and the test-suite look for that sentinel to
detect missing substitutions.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from jinja2 import ChainableUndefined, Environment

from ..options.models import OptionValue, OptionValues
from ..utils import slugify, to_camel, to_kebab, to_pascal, to_snake

NO_VALUE = "<no value>"


class SentinelUndefined(ChainableUndefined):
    """Undefined value that prints as :data:`NO_VALUE`.

    Attribute and item access on it stay undefined, so ``extensions.grpc.grpc``
    is simply falsy when the category was never resolved.
    """

    __slots__ = ()

    def __str__(self) -> str:
        return NO_VALUE


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 template strings with option values as context."""

    def __init__(self, filters: Mapping[str, Callable[..., Any]] | None = None) -> None:
        self.env = Environment(
            undefined=SentinelUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["slugify"] = _slugify_filter
        self.env.filters["kebab_case"] = _kebab_case_filter
        self.env.filters["snake_case"] = _snake_case_filter
        self.env.filters["camel_case"] = _camel_case_filter
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["strip_chars"] = _strip_chars_filter
        if filters:
            self.env.filters.update(filters)

    def render_string(
        self, template_string: str, values: OptionValues | Mapping[str, Any]
    ) -> str:
        """Render an inline template string.

        Args:
            template_string: Template text (a path, a file body or a default).
            values: Resolved option values, or a plain context mapping.

        Returns:
            The rendered text.

        Raises:
            jinja2.TemplateSyntaxError: If the template cannot be parsed.
        """
        context = values.as_context() if isinstance(values, OptionValues) else dict(values)
        template = self.env.from_string(template_string)
        return template.render(**context)

    def render_value(self, value: OptionValue, values: OptionValues) -> OptionValue:
        """Render string values; booleans and integers pass through unchanged."""
        if isinstance(value, str):
            return self.render_string(value, values)
        return value


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _slugify_filter(value: Any) -> str:
    """Convert a string to a URL/filename-safe slug."""
    return slugify(str(value))


def _kebab_case_filter(value: Any) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return to_kebab(str(value))


def _snake_case_filter(value: Any) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    return to_snake(str(value))


def _camel_case_filter(value: Any) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    return to_camel(str(value))


def _pascal_case_filter(value: Any) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return to_pascal(str(value))


def _strip_chars_filter(value: Any, chars: str = " -_") -> str:
    """Remove every character in *chars* from the value."""
    return "".join(ch for ch in str(value) if ch not in chars)
