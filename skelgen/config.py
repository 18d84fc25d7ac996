"""skelgen configuration.

Typed settings for a generation run.  The model uses Pydantic v2 so it can be
validated at construction time and filled from environment variables without
boiler-plate.  Option values for the generated project are not part of this
model; see :class:`skelgen.options.OptionValues`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_FALSE_STRINGS = {"0", "false", "no", "off"}


class Config(BaseModel):
    """Settings for one ``skelgen new`` run.

    Instances are typically created once by the CLI entry point and then
    passed to :class:`~skelgen.scaffolder.ProjectGenerator`.
    """

    output_dir: Path = Field(default=Path("."), description="Parent of the generated project")
    values_file: Path | None = Field(
        default=None, description="YAML values file; prompts interactively when unset"
    )
    init_repo: bool = Field(default=True, description="Run git and go module init afterwards")
    git_command: str = Field(default="git")
    go_command: str = Field(default="go")
    command_timeout: int = Field(default=300, ge=1, description="Per-command timeout in seconds")

    def target_dir(self, project_slug: str) -> Path:
        """Directory the project named *project_slug* is generated into."""
        return self.output_dir / project_slug

    def validate_output_dir(self) -> None:
        """Ensure the output directory exists.

        Raises:
            FileNotFoundError: If :attr:`output_dir` is missing.
            NotADirectoryError: If it exists but is not a directory.
        """
        if not self.output_dir.exists():
            raise FileNotFoundError(f"output directory does not exist: {self.output_dir}")
        if not self.output_dir.is_dir():
            raise NotADirectoryError(f"output path is not a directory: {self.output_dir}")

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SKELGEN_OUTPUT_DIR, SKELGEN_VALUES_FILE, SKELGEN_INIT_REPO,
            SKELGEN_GIT, SKELGEN_GO, SKELGEN_COMMAND_TIMEOUT.

        Keyword arguments take precedence over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SKELGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SKELGEN_OUTPUT_DIR"])
        if os.environ.get("SKELGEN_VALUES_FILE"):
            kwargs["values_file"] = Path(os.environ["SKELGEN_VALUES_FILE"])
        if os.environ.get("SKELGEN_INIT_REPO"):
            kwargs["init_repo"] = os.environ["SKELGEN_INIT_REPO"].lower() not in _FALSE_STRINGS
        if os.environ.get("SKELGEN_GIT"):
            kwargs["git_command"] = os.environ["SKELGEN_GIT"]
        if os.environ.get("SKELGEN_GO"):
            kwargs["go_command"] = os.environ["SKELGEN_GO"]
        if os.environ.get("SKELGEN_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["SKELGEN_COMMAND_TIMEOUT"])

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
