"""skelgen options -- the option schema and its resolution.

Quick usage::

    from skelgen.options import OptionResolver, default_schema

    resolver = OptionResolver(default_schema())
    values = resolver.load_from_file("values.yml")   # or load_interactively()
"""

from skelgen.options.models import (
    Category,
    Option,
    OptionFiles,
    OptionSchema,
    OptionType,
    OptionValues,
)
from skelgen.options.defaults import default_schema
from skelgen.options.resolver import OptionResolver, is_displayable, parse_value

__all__ = [
    "Category",
    "Option",
    "OptionFiles",
    "OptionResolver",
    "OptionSchema",
    "OptionType",
    "OptionValues",
    "default_schema",
    "is_displayable",
    "parse_value",
]
