"""Source collector — deterministic walk over a backend source tree."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

# Extensions that may hold route declarations
SOURCE_EXTENSIONS = {".js", ".ts", ".mjs", ".cjs"}

# Directories to always skip
_SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".zeus-core",
    "node_modules",
    "bower_components",
    "coverage",
    ".next",
    ".nuxt",
    ".cache",
    "dist",
    "build",
    "out",
}

# Declaration files carry types only
_SKIP_SUFFIXES = (".d.ts",)


def collect_source_files(root_dir: str | Path) -> Iterator[Path]:
    """Yield candidate source files under ``root_dir`` in sorted order."""
    for root, dirs, files in os.walk(root_dir):
        # Prune and order in-place so traversal order is reproducible
        dirs[:] = sorted(d for d in dirs if d not in _SKIP_DIRS)

        for name in sorted(files):
            if name.endswith(_SKIP_SUFFIXES):
                continue
            path = Path(root) / name
            if path.suffix in SOURCE_EXTENSIONS:
                yield path
