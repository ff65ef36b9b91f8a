from __future__ import annotations

from pathlib import Path

# Single source of truth for the config file name.
CFG_FILE = "tplroot.yaml"


def config_path(root: Path) -> Path:
    """Path to the project config file <root>/tplroot.yaml."""
    return (root / CFG_FILE).resolve()


__all__ = ["CFG_FILE", "config_path"]
