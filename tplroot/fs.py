from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

import pathspec


def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", errors="ignore") as f:
        return f.read()


def build_exclude_spec(root: Path, patterns: Sequence[str]) -> Optional[pathspec.PathSpec]:
    """
    Build PathSpec from .gitignore plus configured exclude patterns.
    Return None if there is nothing to exclude.
    """
    lines: List[str] = []
    gitignore = root / ".gitignore"
    if gitignore.is_file():
        for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
            ln = ln.strip()
            if ln and not ln.startswith("#"):
                lines.append(ln)
    lines.extend(patterns)
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def iter_files(
    root: Path,
    *,
    extensions: Set[str],
    spec: Optional[pathspec.PathSpec],
) -> Iterable[Path]:
    """
    Recursive file iterator with early pruning of excluded directories.
    Yields files in a stable (sorted) order.
    """
    root = root.resolve()
    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        keep: List[str] = []
        for d in sorted(dirnames):
            rel_dir = Path(dirpath, d).relative_to(root).as_posix()
            if spec and spec.match_file(rel_dir + "/"):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            rel_posix = p.relative_to(root).as_posix()
            if spec and spec.match_file(rel_posix):
                continue
            yield p


__all__ = ["read_text", "build_exclude_spec", "iter_files"]
