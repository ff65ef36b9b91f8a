"""
Main checking pipeline.

source text -> template block -> node tree -> candidate roots -> diagnostics
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .config.model import ProjectConfig, RootOptions
from .diagnostics import Diagnostic
from .errors import TplRootUserError
from .fs import build_exclude_spec, iter_files, read_text
from .markup.nodes import TemplateRoot
from .markup.parser import parse_template
from .markup.tokens import MarkupError
from .rules.root_structure import check_template

_LOG = logging.getLogger("tplroot.engine")

# Template languages the markup reader understands
MARKUP_LANGS = frozenset({"html"})


def _checkable_template(source: str) -> Optional[TemplateRoot]:
    root = parse_template(source)
    if root is not None and root.lang is not None and root.lang.lower() not in MARKUP_LANGS:
        _LOG.debug("Skipping template with lang=%s", root.lang)
        return None
    return root


@dataclass(frozen=True)
class FileReport:
    path: Path
    diagnostics: List[Diagnostic] = field(default_factory=list)
    skipped: bool = False  # no template block, or a non-HTML template lang

    def to_dict(self) -> dict:
        return {
            "path": self.path.as_posix(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def check_source(source: str, options: RootOptions = RootOptions()) -> List[Diagnostic]:
    """
    Checks the template root of SFC source text.

    Sources without a ``<template>`` block, or whose template is written in
    another language (``lang="pug"``), produce no diagnostics.
    """
    root = _checkable_template(source)
    if root is None:
        return []
    return check_template(root, options)


def check_file(path: Path, options: RootOptions = RootOptions()) -> FileReport:
    """
    Raises:
        TplRootUserError: If the file cannot be read or its template markup is broken
    """
    try:
        source = read_text(path)
    except OSError as e:
        raise TplRootUserError(f"Cannot read {path}: {e}") from e

    try:
        root = _checkable_template(source)
    except MarkupError as e:
        raise TplRootUserError(f"{path}: {e}") from e
    if root is None:
        _LOG.debug("No checkable template in %s", path)
        return FileReport(path=path, skipped=True)

    diagnostics = check_template(root, options)
    _LOG.debug("Checked %s: %d diagnostic(s)", path, len(diagnostics))
    return FileReport(path=path, diagnostics=diagnostics)


def collect_files(paths: Sequence[Path], config: ProjectConfig, root: Optional[Path] = None) -> List[Path]:
    """
    Expands CLI paths: directories are walked (extensions + excludes apply),
    explicit files are always kept. Duplicates are dropped, order is stable.
    """
    root = (root or Path.cwd()).resolve()
    extensions = set(config.extensions)
    out: List[Path] = []
    seen = set()

    for raw in paths:
        path = raw if raw.is_absolute() else root / raw
        if path.is_dir():
            spec = build_exclude_spec(path, config.exclude)
            found = list(iter_files(path, extensions=extensions, spec=spec))
            _LOG.debug("Discovered %d file(s) under %s", len(found), path)
        elif path.is_file():
            found = [path]
        else:
            raise TplRootUserError(f"Path not found: {raw}")

        for p in found:
            key = p.resolve()
            if key not in seen:
                seen.add(key)
                out.append(p)

    return out


def check_paths(paths: Sequence[Path], config: ProjectConfig, root: Optional[Path] = None) -> List[FileReport]:
    return [check_file(p, config.options) for p in collect_files(paths, config, root)]


__all__ = [
    "FileReport",
    "MARKUP_LANGS",
    "check_source",
    "check_file",
    "collect_files",
    "check_paths",
]
