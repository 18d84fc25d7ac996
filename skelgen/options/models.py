"""Option schema and resolved value models.

An :class:`OptionSchema` is an ordered, declarative description of every
configurable parameter: base options first, then extension categories.  The
resolver turns it into an :class:`OptionValues` instance, which is also the
shape of the YAML values file::

    base:
      projectName: Awesome Project
      projectSlug: awesome-project
    extensions:
      grpc:
        grpc: true
        grpcGateway: false
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..errors import UnsupportedOptionTypeError

if TYPE_CHECKING:
    from ..scaffolder.templates import TemplateRenderer

OptionValue = Union[str, bool, int]
Validator = Callable[[OptionValue], None]


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


class OptionType(str, Enum):
    """The closed set of types an option value can take."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"

    @classmethod
    def of(cls, value: Any) -> "OptionType":
        """Classify *value* by its exact runtime type.

        ``bool`` is checked before ``int`` because ``True`` is an ``int`` in
        Python but never an integer option.
        """
        if type(value) is bool:
            return cls.BOOL
        if type(value) is int:
            return cls.INT
        if type(value) is str:
            return cls.STRING
        raise UnsupportedOptionTypeError(value)

    @classmethod
    def name_of(cls, value: Any) -> str:
        """Return the type name used in error messages, for any value."""
        try:
            return cls.of(value).value
        except UnsupportedOptionTypeError:
            return type(value).__name__


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OptionFiles:
    """Paths (relative to the project root) tied to a boolean option.

    ``add`` files only survive when the option is enabled; ``remove`` files
    only survive when it is disabled.
    """

    add: tuple[str, ...] = ()
    remove: tuple[str, ...] = ()


@dataclass(frozen=True)
class Option:
    """A single configurable parameter."""

    name: str
    default: OptionValue
    description: str = ""
    depends_on: tuple[str, ...] = ()
    files: OptionFiles = field(default_factory=OptionFiles)
    validator: Validator | None = None

    def __post_init__(self) -> None:
        OptionType.of(self.default)

    @property
    def type(self) -> OptionType:
        return OptionType.of(self.default)

    def resolve_default(
        self, values: "OptionValues", renderer: "TemplateRenderer"
    ) -> OptionValue:
        """Return the default, rendering string defaults against *values*."""
        return renderer.render_value(self.default, values)

    def validate(self, value: OptionValue) -> None:
        """Run the validator; raises ``ValueError`` describing the rejection."""
        if self.validator is not None:
            self.validator(value)


@dataclass(frozen=True)
class Category:
    """A named group of extension options."""

    name: str
    options: tuple[Option, ...] = ()


@dataclass(frozen=True)
class OptionSchema:
    """Ordered base options plus extension categories."""

    base: tuple[Option, ...] = ()
    extensions: tuple[Category, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for _, option in self.iter_options():
            if option.name in seen:
                raise ValueError(f"duplicate option name: {option.name}")
            seen.add(option.name)

    def iter_options(self) -> Iterator[tuple[str | None, Option]]:
        """Yield ``(category_name, option)`` in declared order.

        Base options are yielded with a category name of ``None``.
        """
        for option in self.base:
            yield None, option
        for category in self.extensions:
            for option in category.options:
                yield category.name, option

    def get(self, name: str) -> Option:
        """Return the option called *name*; raises ``KeyError`` if unknown."""
        for _, option in self.iter_options():
            if option.name == name:
                return option
        raise KeyError(name)


# ---------------------------------------------------------------------------
# Resolved values
# ---------------------------------------------------------------------------


class OptionValues(BaseModel):
    """Resolved option values, keyed by option name.

    Instances are frozen and every update goes through :meth:`with_value`
    or :meth:`with_category`, which return a copy with fresh dictionaries.
    The freeze is shallow: the ``base`` and ``extensions`` dictionaries must be
    treated as read-only by callers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: dict[str, Any] = Field(default_factory=dict)
    extensions: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def lookup(self, name: str) -> Any:
        """Return the value of option *name* or ``None`` if it is unresolved."""
        if name in self.base:
            return self.base[name]
        for options in self.extensions.values():
            if name in options:
                return options[name]
        return None

    def with_value(self, category: str | None, name: str, value: OptionValue) -> "OptionValues":
        """Return a copy with *value* recorded for *name*."""
        base = dict(self.base)
        extensions = {key: dict(opts) for key, opts in self.extensions.items()}
        if category is None:
            base[name] = value
        else:
            extensions.setdefault(category, {})[name] = value
        return self.model_copy(update={"base": base, "extensions": extensions})

    def with_category(self, category: str) -> "OptionValues":
        """Return a copy with an entry for *category*, empty unless already present."""
        extensions = {name: dict(opts) for name, opts in self.extensions.items()}
        extensions.setdefault(category, {})
        return self.model_copy(update={"base": dict(self.base), "extensions": extensions})

    def flat(self) -> dict[str, Any]:
        """Return every resolved value keyed by option name."""
        merged: dict[str, Any] = {}
        for options in self.extensions.values():
            merged.update(options)
        merged.update(self.base)
        return merged

    def as_context(self) -> dict[str, Any]:
        """Build the template context.

        Options are exposed by their flat name and, additionally, under
        ``base`` and ``extensions`` for templates that prefer the grouped form.
        """
        return {
            **self.flat(),
            "base": dict(self.base),
            "extensions": {name: dict(opts) for name, opts in self.extensions.items()},
        }

    @classmethod
    def from_yaml(cls, path: str | Path) -> "OptionValues":
        """Load values from a YAML document.

        An empty document yields empty values; unknown top-level keys are
        rejected by the model.
        """
        raw = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(raw) or {}
        return cls.model_validate(data)

    def to_yaml(self) -> str:
        """Serialise the values in the same shape :meth:`from_yaml` reads."""
        return yaml.safe_dump(self.model_dump(), sort_keys=False)
