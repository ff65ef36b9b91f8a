from __future__ import annotations

from .load import SCHEMA_VERSION, load_config
from .model import OPT_DISALLOW_COMMENTS, ProjectConfig, RootOptions
from .paths import CFG_FILE, config_path

__all__ = [
    "load_config",
    "SCHEMA_VERSION",
    "ProjectConfig",
    "RootOptions",
    "OPT_DISALLOW_COMMENTS",
    "CFG_FILE",
    "config_path",
]
