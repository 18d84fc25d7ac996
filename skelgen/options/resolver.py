"""Resolve an option schema into concrete option values.

Values come either from a YAML document (file-sourced) or from answers typed
on an input stream (interactive).  Both paths walk the schema in declared
order: later defaults and dependency gates may reference earlier values, so
the resolver threads an immutable :class:`OptionValues` accumulator through
every step.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.markup import escape

from ..errors import (
    InputClosedError,
    MalformedInputError,
    ParameterNotSetError,
    ParameterSetError,
    TypeMismatchError,
)
from ..scaffolder.templates import TemplateRenderer
from ..utils import console, print_banner, print_category, print_progress, print_warning
from .models import Option, OptionSchema, OptionType, OptionValue, OptionValues

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_displayable(option: Option, values: OptionValues) -> bool:
    """Return ``True`` when every boolean dependency of *option* is enabled.

    Dependencies that resolve to a non-boolean value (or are not resolved at
    all) impose no constraint.
    """
    for name in option.depends_on:
        value = values.lookup(name)
        if type(value) is bool and not value:
            return False
    return True


def parse_value(text: str, option_type: OptionType) -> OptionValue:
    """Convert a line of user input to a value of *option_type*.

    Raises:
        ValueError: If *text* is not a valid literal for the type.
    """
    match option_type:
        case OptionType.STRING:
            return text
        case OptionType.BOOL:
            if text in _TRUE_LITERALS:
                return True
            if text in _FALSE_LITERALS:
                return False
            raise ValueError(f"invalid boolean value {text!r}, use true or false")
        case OptionType.INT:
            if _INT_PATTERN.fullmatch(text) is None:
                raise ValueError(f"invalid integer value {text!r}")
            return int(text)


# ---------------------------------------------------------------------------
# OptionResolver
# ---------------------------------------------------------------------------


class OptionResolver:
    """Builds :class:`OptionValues` for an :class:`OptionSchema`.

    Attributes:
        schema: The ordered option schema.
        renderer: Renderer used for templated defaults.
        stdin: Line-oriented input for interactive prompts.
        out: Console receiving prompts, category headers and warnings.
    """

    def __init__(
        self,
        schema: OptionSchema,
        renderer: TemplateRenderer | None = None,
        stdin: TextIO | None = None,
        out: Console | None = None,
    ) -> None:
        self.schema = schema
        self.renderer = renderer or TemplateRenderer()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.out = out or console

    # -- File-sourced ------------------------------------------------------

    def load_from_file(self, path: str | Path) -> OptionValues:
        """Load values from a YAML file and validate them against the schema."""
        return self.load_from_values(OptionValues.from_yaml(path))

    def load_from_values(self, values: OptionValues) -> OptionValues:
        """Validate pre-supplied *values* against the schema.

        Every base option is required.  Extension options are optional and
        only validated when supplied; an omitted extension option whose
        dependencies are met is recorded with its resolved default, so the
        result is as complete as an interactive run.

        Returns:
            *values*, plus defaults for omitted extension options.

        Raises:
            MalformedInputError: A key does not name an option of the schema
                in that place, or a value is rejected by the option's
                validator.
            ParameterNotSetError: A base option is missing or has its type's
                zero value.
            TypeMismatchError: A value's type differs from the default's type.
            ParameterSetError: A value is supplied for an option whose
                dependencies are not met.
        """
        self._check_layout(values)

        for option in self.schema.base:
            value = values.base.get(option.name)
            # "", False and 0 all count as not set
            if not value:
                raise ParameterNotSetError(option.name)
            self._check_supplied(option, value, values)

        resolved = values
        for category in self.schema.extensions:
            supplied = values.extensions.get(category.name, {})
            for option in category.options:
                if option.name in supplied:
                    self._check_supplied(option, supplied[option.name], resolved)
                elif is_displayable(option, resolved):
                    default = option.resolve_default(resolved, self.renderer)
                    resolved = resolved.with_value(category.name, option.name, default)

        return resolved

    def _check_layout(self, values: OptionValues) -> None:
        """Reject keys that are not declared at that place of the schema."""
        base_names = {option.name for option in self.schema.base}
        for name in values.base:
            if name not in base_names:
                raise MalformedInputError(name, "not a base option")

        categories = {
            category.name: {option.name for option in category.options}
            for category in self.schema.extensions
        }
        for category_name, supplied in values.extensions.items():
            if category_name not in categories:
                raise MalformedInputError(category_name, "unknown extension category")
            for name in supplied:
                if name not in categories[category_name]:
                    raise MalformedInputError(
                        name, f"not an option of category {category_name}"
                    )

    def _check_supplied(self, option: Option, value: Any, values: OptionValues) -> None:
        default = option.resolve_default(values, self.renderer)
        if type(value) is not type(default):
            raise TypeMismatchError(
                option.name,
                expected=OptionType.name_of(default),
                actual=OptionType.name_of(value),
            )

        try:
            option.validate(value)
        except ValueError as exc:
            raise MalformedInputError(option.name, str(exc)) from exc

        if not is_displayable(option, values):
            raise ParameterSetError(option.name)

    # -- Interactive -------------------------------------------------------

    def load_interactively(self) -> OptionValues:
        """Prompt for every displayable option in declared order."""
        print_banner(self.out)
        values = OptionValues()

        for option in self.schema.base:
            values = self._resolve_interactively(None, option, values)

        if self.schema.extensions:
            print_progress(
                "\nYou now have the option to enable additional extensions "
                "(organized in different categories)...\n",
                self.out,
            )
        for category in self.schema.extensions:
            print_category(category.name, self.out)
            values = values.with_category(category.name)
            for option in category.options:
                values = self._resolve_interactively(category.name, option, values)

        return values

    def _resolve_interactively(
        self, category: str | None, option: Option, values: OptionValues
    ) -> OptionValues:
        if not is_displayable(option, values):
            return values

        while True:
            try:
                value = self._read_value(option, values)
            except ValueError as exc:
                print_warning(str(exc), self.out)
                continue
            return values.with_value(category, option.name, value)

    def _read_value(self, option: Option, values: OptionValues) -> OptionValue:
        """Prompt once for *option*.

        Raises:
            ValueError: The input could not be parsed or was rejected by the
                validator; the caller prompts again.
            InputClosedError: The input ended and the default is invalid.
        """
        default = option.resolve_default(values, self.renderer)
        self._print_option(option, default)

        line = self.stdin.readline()
        closed = line == ""
        text = line.strip()

        if text:
            value = parse_value(text, OptionType.of(default))
        else:
            value = default

        try:
            option.validate(value)
        except ValueError as exc:
            if closed:
                raise InputClosedError(option.name) from exc
            raise ValueError(f"Validation failed: {exc}") from exc

        return value

    def _print_option(self, option: Option, default: OptionValue) -> None:
        if option.description:
            self.out.print(f"[dim]{escape(option.description)}[/dim]", highlight=False)
        shown = str(default).lower() if isinstance(default, bool) else str(default)
        self.out.print(
            f"[bold]{escape(option.name)}[/bold]: ({escape(shown)})",
            highlight=False,
        )
        self.out.print()
