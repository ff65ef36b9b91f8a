from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .config.model import ProjectConfig, RootOptions
from .engine import FileReport, check_paths
from .errors import TplRootUserError
from .rules.root_structure import RULE_NAME
from .version import tool_version

_LOG = logging.getLogger("tplroot")


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or os.environ.get("TPLROOT_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tplroot",
        description="Checks that component templates render exactly one root element",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-d", "--debug", action="store_true", help="verbose logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_check = sub.add_parser("check", help=f"run the {RULE_NAME} rule over files and directories")
    sp_check.add_argument("paths", nargs="*", default=["."], metavar="PATH", help="files or directories (default: .)")
    sp_check.add_argument("--config", metavar="FILE", help="config file (default: ./tplroot.yaml)")
    comments = sp_check.add_mutually_exclusive_group()
    comments.add_argument(
        "--disallow-comments",
        dest="disallow_comments",
        action="store_const",
        const=True,
        help="report comments placed directly under the template root",
    )
    comments.add_argument(
        "--allow-comments",
        dest="disallow_comments",
        action="store_const",
        const=False,
        help="ignore comments (overrides the config file)",
    )
    sp_check.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    return p


def _resolve_config(ns: argparse.Namespace, root: Path) -> ProjectConfig:
    explicit = Path(ns.config) if ns.config else None
    cfg = load_config(root, explicit)
    if ns.disallow_comments is not None:
        cfg = ProjectConfig(
            extensions=cfg.extensions,
            exclude=cfg.exclude,
            options=RootOptions(disallow_comments=ns.disallow_comments),
        )
    return cfg


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _write_text(reports: List[FileReport], root: Path) -> None:
    for report in reports:
        shown = _display_path(report.path, root)
        for d in report.diagnostics:
            sys.stdout.write(d.format(shown) + "\n")


def _write_json(reports: List[FileReport], root: Path) -> None:
    data = []
    for report in reports:
        if report.skipped:
            continue
        item = report.to_dict()
        item["path"] = _display_path(report.path, root)
        data.append(item)
    sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.debug)
    root = Path.cwd().resolve()

    try:
        if ns.cmd == "check":
            cfg = _resolve_config(ns, root)
            reports = check_paths([Path(p) for p in ns.paths], cfg, root)
            if ns.format == "json":
                _write_json(reports, root)
            else:
                _write_text(reports, root)

            total = sum(len(r.diagnostics) for r in reports)
            files = sum(1 for r in reports if r.diagnostics)
            if ns.format == "text":
                sys.stderr.write(f"{total} problem(s) in {files} of {len(reports)} file(s)\n")
            return 1 if total else 0

    except TplRootUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
