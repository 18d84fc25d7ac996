"""skelgen scaffolder -- renders the template tree into a new project.

This module takes resolved option values and materializes the embedded
``_template`` tree into ``<output_dir>/<projectSlug>``, prunes files of
disabled extensions and bootstraps git and the Go module.

Quick usage::

    from skelgen.config import Config
    from skelgen.options import OptionResolver, default_schema
    from skelgen.scaffolder import ProjectGenerator

    values = OptionResolver(default_schema()).load_from_file("values.yml")
    project_path = ProjectGenerator(Config(output_dir=Path("/tmp"))).generate(values)
"""

from skelgen.scaffolder.generator import ProjectGenerator, remove_tree_best_effort
from skelgen.scaffolder.pruner import prune_files
from skelgen.scaffolder.templates import NO_VALUE, TemplateRenderer
from skelgen.scaffolder.tree import TEMPLATE_KEY, TemplateTree

__all__ = [
    "NO_VALUE",
    "ProjectGenerator",
    "TEMPLATE_KEY",
    "TemplateRenderer",
    "TemplateTree",
    "prune_files",
    "remove_tree_best_effort",
]
