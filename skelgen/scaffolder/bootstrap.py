"""Repository bootstrap for a freshly generated project.

Initialises git and the Go module inside the target directory.  The commands
are configurable through :class:`~skelgen.config.Config` so the tools can be
pointed at non-default executables.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..errors import BootstrapError
from ..utils import run_command


def bootstrap_commands(module_name: str, config: Config) -> list[list[str]]:
    """Return the commands run by :func:`init_repository`, in order."""
    return [
        [config.git_command, "init"],
        [config.go_command, "mod", "init", module_name],
        [config.go_command, "mod", "tidy"],
    ]


def init_repository(target_dir: str | Path, module_name: str, config: Config) -> None:
    """Run version-control and module initialisation in *target_dir*.

    Raises:
        BootstrapError: If any command exits with a non-zero code.
    """
    for cmd in bootstrap_commands(module_name, config):
        returncode, _, stderr = run_command(
            cmd, cwd=target_dir, timeout=config.command_timeout
        )
        if returncode != 0:
            raise BootstrapError(" ".join(cmd), stderr)
