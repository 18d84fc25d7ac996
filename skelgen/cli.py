"""Command line entry point.

Usage::

    skelgen new
    skelgen new --config values.yml --output ./projects
    skelgen new -c values.yml --no-init
    skelgen new --save-values answers.yml
    skelgen version
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from . import __version__
from .config import Config
from .errors import SkelgenError
from .options import OptionResolver, default_schema
from .scaffolder import ProjectGenerator, TemplateRenderer
from .utils import console, print_error, print_progress, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skelgen",
        description="skelgen -- generate a new Go service project from a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  skelgen new\n"
            "  skelgen new -c values.yml -o ./projects\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="create a new project")
    new_parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="YAML file with option values (prompts interactively if omitted)",
    )
    new_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    new_parser.add_argument(
        "--no-init",
        action="store_true",
        help="Skip git and go module initialisation",
    )
    new_parser.add_argument(
        "--save-values",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write the resolved answers to FILE for reuse with --config",
    )

    subparsers.add_parser("version", help="print the skelgen version")
    return parser


def _handle_new(args: argparse.Namespace) -> int:
    config = Config.from_env(
        output_dir=args.output,
        values_file=args.config,
        init_repo=False if args.no_init else None,
    )
    renderer = TemplateRenderer()
    schema = default_schema()
    resolver = OptionResolver(schema, renderer=renderer)

    if config.values_file is not None:
        values = resolver.load_from_file(config.values_file)
    else:
        values = resolver.load_interactively()

    if args.save_values is not None:
        args.save_values.write_text(values.to_yaml(), encoding="utf-8")
        print_progress(f"Saved answers to {args.save_values}")

    print_summary_table(values.flat(), title="Options")

    generator = ProjectGenerator(config, schema=schema, renderer=renderer)
    project_path = generator.generate(values)
    print_success(f"Project created at {project_path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``skelgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        console.print(f"skelgen {__version__}", highlight=False)
        return 0

    try:
        return _handle_new(args)
    except (SkelgenError, ValidationError, yaml.YAMLError, OSError) as exc:
        print_error(f"Error: {exc}")
        return 1
    except KeyboardInterrupt:
        print_error("Aborted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
