from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..errors import ConfigError

# Rule option keys as written in config files
OPT_DISALLOW_COMMENTS = "disallowComments"


@dataclass(frozen=True)
class RootOptions:
    """Resolved options of the template root rule."""
    disallow_comments: bool = False

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> RootOptions:
        """
        Builds options from the rule's option mapping ``{disallowComments: bool}``.

        Raises:
            ConfigError: On unknown keys or non-boolean values
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ConfigError(f"Rule options must be a mapping, got {type(raw).__name__}")

        unknown = sorted(set(raw) - {OPT_DISALLOW_COMMENTS})
        if unknown:
            raise ConfigError(f"Unknown rule option(s): {', '.join(unknown)}")

        value = raw.get(OPT_DISALLOW_COMMENTS, False)
        if not isinstance(value, bool):
            raise ConfigError(f"'{OPT_DISALLOW_COMMENTS}' must be a boolean, got {value!r}")
        return cls(disallow_comments=value)


@dataclass(frozen=True)
class ProjectConfig:
    extensions: List[str] = field(default_factory=lambda: [".vue"])
    exclude: List[str] = field(default_factory=list)
    options: RootOptions = RootOptions()


__all__ = ["RootOptions", "ProjectConfig", "OPT_DISALLOW_COMMENTS"]
