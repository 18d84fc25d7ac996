"""Shared utility functions for skelgen.

Provides synchronous command execution, name-case helpers used by the
template filters, and Rich-based console output.  Every output helper accepts
an optional ``Console`` so callers (and tests) can redirect output away from
the module-level console.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 300,
) -> tuple[int, str, str]:
    """Run a command and wait for it to finish.

    Args:
        cmd: Command as a list of arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A missing executable is
        reported as return code 127 with the error text in stderr.
    """
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        return (127, "", str(exc))
    except subprocess.TimeoutExpired:
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    return (completed.returncode, completed.stdout.strip(), completed.stderr.strip())


# ---------------------------------------------------------------------------
# Name / case helpers
# ---------------------------------------------------------------------------


def _split_words(value: str) -> list[str]:
    """Split ``value`` on separators and lower/upper case boundaries."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1 \2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", s1)
    return [word for word in re.split(r"[^a-zA-Z0-9]+", s2) if word]


def slugify(value: str) -> str:
    """Convert a string to a URL/filename-safe slug.

    Examples::

        slugify("Awesome Project") -> "awesome-project"
        slugify("  2FA (TOTP)  ") -> "2fa-totp"
    """
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def to_kebab(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return "-".join(word.lower() for word in _split_words(value))


def to_snake(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    return "_".join(word.lower() for word in _split_words(value))


def to_pascal(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in _split_words(value))


def to_camel(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = to_pascal(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

BANNER = r"""
     _        _
 ___| | _____| | __ _  ___ _ __
/ __| |/ / _ \ |/ _` |/ _ \ '_ \
\__ \   <  __/ | (_| |  __/ | | |
|___/_|\_\___|_|\__, |\___|_| |_|
                |___/
"""


def print_banner(out: Console | None = None) -> None:
    """Print the welcome banner shown before interactive prompts."""
    out = out or console
    out.print(BANNER, style="bold cyan", markup=False, highlight=False)
    out.print(
        Panel(
            "Answer the questions below to generate a new project.\n"
            "Press enter to accept the value shown in parentheses.",
            style="cyan",
        )
    )


def print_category(name: str, out: Console | None = None) -> None:
    """Print a full-width rule announcing an extension category."""
    out = out or console
    out.print()
    out.print(
        Rule(
            f"[bold bright_green] {escape(name)} [/bold bright_green]",
            style="bright_green",
        )
    )
    out.print()


def print_progress(message: str, out: Console | None = None) -> None:
    """Print a cyan progress message."""
    out = out or console
    out.print(f"[cyan]{escape(message)}[/cyan]", highlight=False)


def print_summary_table(
    data: dict[str, object], title: str = "Summary", out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print to.
    """
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Option", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]", highlight=False)


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{escape(message)}[/bold red]", highlight=False)


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]", highlight=False)
