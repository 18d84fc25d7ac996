"""Post-generation pruning.

The template tree itself is not conditional: every file is materialized.
Afterwards each boolean option decides which of its files survive.  An
enabled option deletes its ``remove`` files, a disabled one deletes its
``add`` files.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ..options.models import OptionSchema, OptionValues


def remove_path(path: Path) -> bool:
    """Delete a file or directory tree; a missing path is not an error.

    Returns:
        ``True`` if something was removed.
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return True
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


def prune_files(schema: OptionSchema, values: OptionValues, target_dir: str | Path) -> list[Path]:
    """Delete files belonging to disabled (or superseded) extensions.

    Options that were not resolved or are not boolean are skipped.

    Args:
        schema: The option schema carrying per-option file lists.
        values: The resolved option values.
        target_dir: Root of the generated project.

    Returns:
        The paths that were actually removed, in processing order.

    Raises:
        OSError: The first filesystem error aborts the pass; files already
            removed stay removed.
    """
    root = Path(target_dir)
    removed: list[Path] = []

    for _, option in schema.iter_options():
        value = values.lookup(option.name)
        if type(value) is not bool:
            continue

        obsolete = option.files.remove if value else option.files.add
        for relative in obsolete:
            path = root / relative
            if remove_path(path):
                removed.append(path)

    return removed
