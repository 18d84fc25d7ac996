"""The embedded template source tree.

The scaffold ships as package data below ``skelgen/scaffolder/_template``.
:class:`TemplateTree` walks it (or any other directory-like root) in a stable
order so that generation is deterministic: parents are yielded before their
children, siblings in lexical order of their names.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

TEMPLATE_KEY = "_template"


@dataclass(frozen=True)
class TreeEntry:
    """A directory or file of the source tree.

    ``path`` is ``/``-separated and starts with the tree's root marker, e.g.
    ``_template/cmd/{{ appName }}/main.go``.
    """

    path: str
    is_dir: bool
    node: Traversable


class TemplateTree:
    """Read-only view over a template source tree."""

    def __init__(self, root: Traversable | Path | None = None, key: str = TEMPLATE_KEY) -> None:
        if root is None:
            root = resources.files("skelgen.scaffolder").joinpath(key)
        self.root = root
        self.key = key

    def walk(self) -> Iterator[TreeEntry]:
        """Yield every entry pre-order, starting with the root itself."""
        if not self.root.is_dir():
            raise FileNotFoundError(f"template root not found: {self.root}")
        yield TreeEntry(self.key, True, self.root)
        yield from self._walk(self.root, self.key)

    def _walk(self, node: Traversable, prefix: str) -> Iterator[TreeEntry]:
        for child in sorted(node.iterdir(), key=lambda item: item.name):
            if child.name == "__pycache__":
                continue
            path = f"{prefix}/{child.name}"
            if child.is_dir():
                yield TreeEntry(path, True, child)
                yield from self._walk(child, path)
            else:
                yield TreeEntry(path, False, child)

    def read(self, entry: TreeEntry) -> bytes:
        """Return the raw content of a file entry."""
        return entry.node.read_bytes()
