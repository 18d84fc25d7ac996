"""Shared pytest fixtures for the skelgen test suite.

Provides reusable fixtures for:
- Output-capturing Rich consoles
- The sample values file and the values loaded from it
- A small option schema and template tree for generator tests
- Generator configuration pointing at a temporary directory
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from skelgen.config import Config
from skelgen.options.models import Category, Option, OptionFiles, OptionSchema, OptionValues
from skelgen.scaffolder.tree import TemplateTree

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving everything printed to :func:`out_console`."""
    return io.StringIO()


@pytest.fixture
def out_console(output: io.StringIO) -> Console:
    """A plain-text console writing to the ``output`` buffer."""
    return Console(file=output, width=200, color_system=None, force_terminal=False)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


@pytest.fixture
def values_file() -> Path:
    """Path to the sample values file (every extension enabled)."""
    return FIXTURES_DIR / "values.yml"


@pytest.fixture
def full_values(values_file: Path) -> OptionValues:
    """Values for the default schema with every extension enabled."""
    return OptionValues.from_yaml(values_file)


# ---------------------------------------------------------------------------
# Small schema + tree for generator tests
# ---------------------------------------------------------------------------


@pytest.fixture
def small_schema() -> OptionSchema:
    """Schema with the two options the generator needs plus one extension."""
    return OptionSchema(
        base=(
            Option(name="projectSlug", default="demo"),
            Option(name="moduleName", default="example.com/{{ projectSlug }}"),
            Option(name="appName", default="demo"),
        ),
        extensions=(
            Category(
                name="extras",
                options=(
                    Option(
                        name="docs",
                        default=False,
                        files=OptionFiles(add=("docs",), remove=("NODOCS",)),
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def small_values() -> OptionValues:
    return OptionValues(
        base={"projectSlug": "demo", "moduleName": "example.com/demo", "appName": "demo"},
        extensions={"extras": {"docs": True}},
    )


@pytest.fixture
def small_tree(tmp_path: Path) -> TemplateTree:
    """A template tree with a templated directory, a doc folder and a marker."""
    root = tmp_path / "tree" / "_template"
    (root / "cmd" / "{{ appName }}").mkdir(parents=True)
    (root / "cmd" / "{{ appName }}" / "main.go").write_text(
        "package main // {{ moduleName }}\n", encoding="utf-8"
    )
    (root / "docs").mkdir()
    (root / "docs" / "index.md").write_text("# {{ projectSlug }}\n", encoding="utf-8")
    (root / "NODOCS").write_text("no docs\n", encoding="utf-8")
    (root / "README.md").write_text(
        "{{ projectSlug | pascal_case }}\n", encoding="utf-8"
    )
    return TemplateTree(root)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory projects are generated into."""
    directory = tmp_path / "out"
    directory.mkdir()
    return directory


@pytest.fixture
def no_init_config(output_dir: Path) -> Config:
    """Generator config that skips git and go module bootstrap."""
    return Config(output_dir=output_dir, init_repo=False)
