from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from .model import ProjectConfig, RootOptions
from .paths import config_path

SCHEMA_VERSION = 1

_LOG = logging.getLogger("tplroot.config")

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "extensions": [".vue"],
    "exclude": [
        "node_modules/",
        ".git/",
        "dist/",
    ],
    "options": {},
}

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values on top of the defaults."""
    cfg = dict(_DEFAULT_CFG)
    cfg.update(raw)
    return cfg


def _read_yaml_map(path: Path) -> Dict[str, Any]:
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def _string_list(cfg: Dict[str, Any], key: str, path: Path) -> list[str]:
    value = cfg.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: '{key}' must be a list of strings")
    return list(value)


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(root: Path, explicit: Optional[Path] = None) -> ProjectConfig:
    """
    Load tplroot.yaml.

    • An explicit path must exist; the default file may be missing (defaults apply).
    • A missing schema_version is taken as the current one.
    • Rule options are validated here, not at check time.
    """
    path = explicit if explicit is not None else config_path(root)
    if not path.is_file():
        if explicit is not None:
            raise ConfigError(f"Config file not found: {path}")
        _LOG.debug("No config at %s, using defaults", path)
        return _from_dict(dict(_DEFAULT_CFG), path)

    _LOG.debug("Loading config %s", path)
    raw = _read_yaml_map(path)
    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise ConfigError(
            f"Unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )
    return _from_dict(_merge_defaults(raw), path)


def _from_dict(cfg: Dict[str, Any], path: Path) -> ProjectConfig:
    extensions = [e.lower() if e.startswith(".") else f".{e.lower()}" for e in _string_list(cfg, "extensions", path)]
    return ProjectConfig(
        extensions=extensions,
        exclude=_string_list(cfg, "exclude", path),
        options=RootOptions.from_dict(cfg.get("options")),
    )


__all__ = ["load_config", "SCHEMA_VERSION"]
