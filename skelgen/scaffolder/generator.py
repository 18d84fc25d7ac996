"""Main scaffolding orchestrator.

Takes resolved :class:`OptionValues` and generates a project directory from
the embedded template tree, then prunes files of disabled extensions and
bootstraps git and the Go module.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.console import Console

from ..config import Config
from ..errors import AlreadyExistsError, BootstrapError, GenerationError, ParameterNotSetError
from ..options.defaults import MODULE_NAME_OPTION, TARGET_DIR_OPTION, default_schema
from ..options.models import OptionSchema, OptionValues
from ..utils import console, print_progress, print_warning
from .bootstrap import init_repository
from .pruner import prune_files
from .templates import NO_VALUE, TemplateRenderer
from .tree import TemplateTree, TreeEntry


# ---------------------------------------------------------------------------
# Rollback
# ---------------------------------------------------------------------------


def remove_tree_best_effort(path: Path, out: Console | None = None) -> None:
    """Delete *path* recursively, reporting (never raising) secondary failures.

    Used to roll back a partially generated project.  The error that caused
    the rollback is what the caller must see, so a failed cleanup is only
    printed as a warning.
    """
    if not path.exists():
        return
    try:
        shutil.rmtree(path)
    except OSError as exc:
        print_warning(f"Could not remove {path}: {exc}", out)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given resolved option values, ``generate`` produces
    ``<output_dir>/<projectSlug>`` containing:
    - every file of the template tree, with paths and contents rendered
    - minus the files of extensions that were disabled (or superseded)
    - an initialised git repository and Go module (unless disabled)
    """

    def __init__(
        self,
        config: Config | None = None,
        schema: OptionSchema | None = None,
        renderer: TemplateRenderer | None = None,
        tree: TemplateTree | None = None,
        out: Console | None = None,
    ) -> None:
        self.config = config or Config()
        self.schema = schema or default_schema()
        self.renderer = renderer or TemplateRenderer()
        self.tree = tree or TemplateTree()
        self.out = out or console

    # -- Public API --------------------------------------------------------

    def generate(self, values: OptionValues) -> Path:
        """Generate the complete project.

        Args:
            values: Resolved option values.  ``projectSlug`` names the project
                directory; ``moduleName`` is passed to the module bootstrap.

        Returns:
            Path to the generated project root.

        Raises:
            AlreadyExistsError: The project directory is already present.
            ParameterNotSetError: ``projectSlug`` (or ``moduleName`` when
                bootstrapping) has no value.
            GenerationError: Rendering, pruning or bootstrapping failed.  A
                rendering failure removes the project directory first.
        """
        self.config.validate_output_dir()

        slug = values.base.get(TARGET_DIR_OPTION)
        if not slug:
            raise ParameterNotSetError(TARGET_DIR_OPTION)

        print_progress("Generating repo folder...", self.out)
        target_dir = self.config.target_dir(str(slug))
        print_progress(f"Writing to {target_dir}...", self.out)

        # 1. Render the template tree
        self.materialize(values, target_dir)

        # 2. Drop files of unused extensions
        print_progress("Removing obsolete files of unused integrations...", self.out)
        try:
            prune_files(self.schema, values, target_dir)
        except OSError as exc:
            raise GenerationError("prune", str(exc)) from exc

        # 3. git + go module
        if self.config.init_repo:
            module_name = values.base.get(MODULE_NAME_OPTION)
            if not module_name:
                raise ParameterNotSetError(MODULE_NAME_OPTION)
            print_progress("Initializing git and Go modules...", self.out)
            try:
                init_repository(target_dir, str(module_name), self.config)
            except BootstrapError as exc:
                raise GenerationError("bootstrap", str(exc)) from exc

        return target_dir

    def materialize(self, values: OptionValues, target_dir: str | Path) -> list[Path]:
        """Render the template tree into *target_dir*.

        The directory must not exist yet.  If anything fails during the walk,
        including a ``KeyboardInterrupt``, the directory is removed again
        before the error is raised.

        Returns:
            The written file paths, in walk order.
        """
        target = Path(target_dir)
        if target.exists():
            raise AlreadyExistsError(target)

        written: list[Path] = []
        current = self.tree.key
        try:
            for entry in self.tree.walk():
                current = entry.path
                destination = self._destination(entry, values, target)
                if entry.is_dir:
                    destination.mkdir(parents=True, exist_ok=True)
                    continue

                content = self.tree.read(entry).decode("utf-8")
                rendered = self.renderer.render_string(content, values)
                destination.write_text(rendered, encoding="utf-8")
                written.append(destination)
        except BaseException as exc:
            remove_tree_best_effort(target, self.out)
            # interrupts and exits propagate unwrapped
            if not isinstance(exc, Exception):
                raise
            raise GenerationError("render", f"{current}: {exc}") from exc

        return written

    # -- Helpers -----------------------------------------------------------

    def _destination(self, entry: TreeEntry, values: OptionValues, target: Path) -> Path:
        """Render the entry's path and rebase it from the tree key onto *target*."""
        rendered = self.renderer.render_string(entry.path, values)
        if NO_VALUE in rendered:
            raise ValueError(f"unresolved value in path {rendered!r}")
        relative = rendered[len(self.tree.key):].lstrip("/")
        return target / relative if relative else target
